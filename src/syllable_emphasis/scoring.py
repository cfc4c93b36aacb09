from __future__ import annotations

import math
import re
from typing import List

from .models import ReadabilityStats
from .syllables import count_syllables

WORD_RE = re.compile(r"\w+", re.UNICODE)
SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    """Split text on runs of terminal punctuation, dropping blank pieces."""
    return [s for s in SENTENCE_SPLIT_RE.split(text) if s.strip()]


def extract_words(text: str) -> List[str]:
    return WORD_RE.findall(text)


def readability_stats(text: str) -> ReadabilityStats:
    """Count sentences, words and syllables and compute the reading-ease score."""
    sentences = split_sentences(text)
    words = extract_words(text)
    syllables = sum(count_syllables(word) for word in words)
    if not sentences or not words:
        return ReadabilityStats(
            sentences=len(sentences), words=len(words), syllables=syllables, score=0.0
        )

    score = (
        206.835
        - 1.015 * (len(words) / len(sentences))
        - 84.6 * (syllables / len(words))
    )
    return ReadabilityStats(
        sentences=len(sentences),
        words=len(words),
        syllables=syllables,
        score=_round_half_up(score),
    )


def flesch_reading_ease(text: str) -> float:
    """
    Return the Flesch reading-ease score of text, rounded to 2 decimals.
    Text without sentences or words scores exactly 0.
    """
    return readability_stats(text).score


def score_in_band(score: float, lower: float, upper: float) -> bool:
    return lower <= score <= upper


def _round_half_up(value: float, digits: int = 2) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
