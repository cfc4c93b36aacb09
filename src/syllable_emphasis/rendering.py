from __future__ import annotations

import re

from .models import RenderedText

STRONG_SPAN_RE = re.compile(r"\*\*(.*?)\*\*")
MARKER = "**"

BOLD_UPPER_START = 0x1D400
BOLD_LOWER_START = 0x1D41A
BOLD_DIGIT_START = 0x1D7CE


def to_html(markdown: str) -> str:
    """Replace each ``**span**`` with ``<strong>span</strong>``."""
    return STRONG_SPAN_RE.sub(r"<strong>\1</strong>", markdown)


def strip_markers(markdown: str) -> str:
    return markdown.replace(MARKER, "")


def to_unicode_bold(text: str) -> str:
    """Map ASCII letters and digits to mathematical bold; leave everything else."""
    return "".join(_bold_char(ch) for ch in text)


def _bold_char(ch: str) -> str:
    code = ord(ch)
    if 65 <= code <= 90:
        return chr(BOLD_UPPER_START + code - 65)
    if 97 <= code <= 122:
        return chr(BOLD_LOWER_START + code - 97)
    if 48 <= code <= 57:
        return chr(BOLD_DIGIT_START + code - 48)
    return ch


def render(markdown: str) -> RenderedText:
    """Build the hypertext, Unicode bold and markup renderings of one result."""
    return RenderedText(
        html=to_html(markdown),
        unicode=to_unicode_bold(strip_markers(markdown)),
        markdown=markdown,
    )
