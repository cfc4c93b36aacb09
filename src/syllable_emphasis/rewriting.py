from __future__ import annotations

import logging
import re
from typing import List

from .scoring import flesch_reading_ease, score_in_band

logger = logging.getLogger(__name__)

SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
CLAUSE_BOUNDARY_RE = re.compile(r",\s*")
WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_LOWER_BAND = 74.0
DEFAULT_UPPER_BAND = 82.0


def adjust_readability(
    text: str,
    lower: float = DEFAULT_LOWER_BAND,
    upper: float = DEFAULT_UPPER_BAND,
) -> str:
    """
    Resegment text so its sentences move toward the [lower, upper] reading-ease band.

    Text that is empty or already inside the band is returned untouched. Otherwise
    every sentence outside the band is split once, on commas when it has any and
    at its word midpoint when it does not. The produced parts are not scored
    again, so a part may still fall outside the band.
    """
    if not text:
        return text
    score = flesch_reading_ease(text)
    if score_in_band(score, lower, upper):
        logger.debug("Score %.2f already inside [%.1f, %.1f]", score, lower, upper)
        return text

    parts: List[str] = []
    split_count = 0
    for sentence in SENTENCE_BOUNDARY_RE.split(text):
        trimmed = sentence.strip()
        if not trimmed:
            continue
        sentence_score = flesch_reading_ease(trimmed)
        if score_in_band(sentence_score, lower, upper):
            parts.append(trimmed)
            continue
        split_count += 1
        logger.debug("Splitting sentence scored %.2f: %r", sentence_score, trimmed)
        parts.extend(
            part.strip() for part in split_sentence(trimmed) if part.strip()
        )

    logger.info(
        "Adjusted readability %.2f outside [%.1f, %.1f]: split %d sentence(s) into %d part(s)",
        score,
        lower,
        upper,
        split_count,
        len(parts),
    )
    return " ".join(parts)


def split_sentence(sentence: str) -> List[str]:
    """Split a sentence on commas, or in two halves by word count when it has none."""
    clauses = CLAUSE_BOUNDARY_RE.split(sentence)
    if len(clauses) > 1:
        return clauses
    return bisect_words(sentence)


def bisect_words(sentence: str) -> List[str]:
    words = WHITESPACE_RE.split(sentence.strip())
    mid = len(words) // 2
    return [" ".join(words[:mid]), " ".join(words[mid:])]
