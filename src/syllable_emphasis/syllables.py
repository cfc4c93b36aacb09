from __future__ import annotations

import re

VOWELS = "aeiouy"
VOWEL_RUN_RE = re.compile(f"[{VOWELS}]+")


def count_syllables(word: str) -> int:
    """
    Estimate the syllable count of a word as its number of vowel runs.

    This is a heuristic: "rhythm" counts as one syllable (one ``y`` run) and
    silent vowels are counted. Words without any vowel run count as one.
    """
    runs = VOWEL_RUN_RE.findall(word.lower())
    return len(runs) or 1
