from __future__ import annotations

import logging
import math
from typing import List

from .noise import NormalSampler

logger = logging.getLogger(__name__)

DEFAULT_BASE_SIZE = 21
DEFAULT_MIN_SIZE = 4
DEFAULT_MAX_SIZE = 12


def block_count(total: int) -> int:
    """Number of blocks requested for ``total`` syllables: one per pair."""
    return math.ceil(max(0, total) / 2)


def brownian_block_sizes(
    total: int,
    sampler: NormalSampler,
    base: int = DEFAULT_BASE_SIZE,
    min_size: int = DEFAULT_MIN_SIZE,
    max_size: int = DEFAULT_MAX_SIZE,
) -> List[int]:
    """
    Draw block sizes from a discrete Brownian walk.

    The first block is ``base`` and is not clamped. Every later block is
    ``floor(base - |W|)`` clamped into [min_size, max_size], where W is the
    running sum of normal samples. The sizes are not required to add up to
    ``total``; callers must cope with a short or empty trailing block.
    """
    n_blocks = block_count(total)
    if n_blocks == 0:
        return []

    sizes = [base]
    walk = 0.0
    for _ in range(1, n_blocks):
        walk += sampler.sample()
        raw = math.floor(base - abs(walk))
        sizes.append(min(max(raw, min_size), max_size))

    logger.debug("Drew %d block sizes for %d syllables", len(sizes), total)
    return sizes
