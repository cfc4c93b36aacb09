from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Classification of a token produced by the syllable tokenizer."""

    SEPARATOR = "separator"
    SYLLABLE = "syllable"


@dataclass(frozen=True, slots=True)
class Token:
    """A run of text that is either a separator or a syllable."""

    kind: TokenKind
    text: str

    @property
    def is_syllable(self) -> bool:
        return self.kind is TokenKind.SYLLABLE


@dataclass(slots=True)
class ReadabilityStats:
    """Counts behind a Flesch reading-ease score."""

    sentences: int
    words: int
    syllables: int
    score: float


@dataclass(slots=True)
class RenderedText:
    """The three encodings of one processed passage."""

    html: str
    unicode: str
    markdown: str
