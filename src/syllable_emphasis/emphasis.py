from __future__ import annotations

import math
from dataclasses import replace
from typing import List, Sequence

from .models import Token
from .rendering import MARKER

SIGMA_LEFT = 2.41
SIGMA_RIGHT = 3.74
EMPHASIS_THRESHOLD = 0.8


def asymmetric_gaussian(
    offset: float, sigma_left: float = SIGMA_LEFT, sigma_right: float = SIGMA_RIGHT
) -> float:
    """Bell-curve weight of an offset from the block center, wider on the right."""
    sigma = sigma_right if offset >= 0 else sigma_left
    return math.exp(-(offset * offset) / (2 * sigma * sigma))


def syllable_indices(tokens: Sequence[Token]) -> List[int]:
    return [idx for idx, token in enumerate(tokens) if token.is_syllable]


def partition_blocks(indices: Sequence[int], sizes: Sequence[int]) -> List[List[int]]:
    """
    Cut ``indices`` into consecutive blocks of the requested sizes.
    Blocks past the end of the stream come back short or empty.
    """
    blocks: List[List[int]] = []
    start = 0
    for size in sizes:
        blocks.append(list(indices[start : start + size]))
        start += size
    return blocks


def select_emphasis(
    tokens: Sequence[Token],
    sizes: Sequence[int],
    *,
    sigma_left: float = SIGMA_LEFT,
    sigma_right: float = SIGMA_RIGHT,
    threshold: float = EMPHASIS_THRESHOLD,
    marker: str = MARKER,
) -> List[Token]:
    """
    Return a copy of ``tokens`` with the syllables near each block center
    wrapped in ``marker``. Separators keep their place and are not counted.
    """
    marked = list(tokens)
    for block in partition_blocks(syllable_indices(tokens), sizes):
        center = len(block) // 2
        for pos, token_idx in enumerate(block):
            weight = asymmetric_gaussian(pos - center, sigma_left, sigma_right)
            if weight > threshold:
                token = marked[token_idx]
                marked[token_idx] = replace(token, text=f"{marker}{token.text}{marker}")
    return marked
