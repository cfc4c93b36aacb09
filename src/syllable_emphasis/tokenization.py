from __future__ import annotations

import re
from typing import List

from .models import Token, TokenKind

RUN_PATTERN = re.compile(r"(?P<word>\w+)|(?P<punct>[^\w\s])|(?P<space>\s+)", re.UNICODE)

_V = "aeiouyAEIOUY"
# Leading consonants, a vowel run, then either the consonants before the next
# vowel or the consonants closing the word.
SYLLABLE_PATTERN = re.compile(
    rf"[^{_V}]*[{_V}]+(?:[^{_V}]+(?=[{_V}])|[^{_V}]*\Z)"
)


def tokenize_syllables(text: str) -> List[Token]:
    """Split text into separator and syllable tokens that concatenate back to text."""
    tokens: List[Token] = []
    for match in RUN_PATTERN.finditer(text):
        if match.lastgroup == "word":
            tokens.extend(
                Token(TokenKind.SYLLABLE, part) for part in split_word(match.group())
            )
        else:
            tokens.append(Token(TokenKind.SEPARATOR, match.group()))
    return tokens


def split_word(word: str) -> List[str]:
    """Split a word run into vowel-anchored syllables; vowel-less runs stay whole."""
    parts = SYLLABLE_PATTERN.findall(word)
    return parts or [word]


def join_tokens(tokens: List[Token]) -> str:
    return "".join(token.text for token in tokens)
