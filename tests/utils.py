from __future__ import annotations

from typing import Callable, Iterable, List

from syllable_emphasis.models import Token

# Ten single-vowel words: ten syllables, no commas, one sentence.
TEN_SYLLABLES = "ba be bi bo bu ca ce ci co cu"


def uniform_from(values: Iterable[float]) -> Callable[[], float]:
    """Return a zero-arg callable that replays ``values`` in order."""
    iterator = iter(values)
    return lambda: next(iterator)


def syllable_texts(tokens: List[Token]) -> List[str]:
    return [token.text for token in tokens if token.is_syllable]
