"""Plain-text rendering of HTML fragments."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_INLINE_WS = re.compile(r"[ \t]+")
_LINE_BREAKS = re.compile(r"\s*\n\s*")


def strip_html_tags(value: str | None) -> str:
    """Drop markup, keep one line per text block.

    Entities are decoded (``&nbsp;`` becomes a plain space), runs of spaces and
    tabs collapse to one space, runs of line breaks collapse to one, and the
    result is trimmed.
    """
    if not value:
        return ""

    text = BeautifulSoup(value, "lxml").get_text("\n")
    text = text.replace("\xa0", " ")
    text = _INLINE_WS.sub(" ", text)
    text = _LINE_BREAKS.sub("\n", text)
    return text.strip()
