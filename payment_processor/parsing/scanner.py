"""Low-level text scanning helpers used by the instruction grammar."""

from __future__ import annotations

import re
from typing import Optional


def find_keyword(text: str, keyword: str, start: int = 0) -> Optional[int]:
    """Locate ``keyword`` in ``text`` at or after ``start``, ignoring case.

    Matching is plain substring search, so a keyword may be found inside a
    larger token. Returns the offset into ``text`` or ``None``.
    """

    match = re.compile(re.escape(keyword), re.IGNORECASE | re.ASCII).search(text, start)
    return match.start() if match else None


def skip_whitespace(text: str, start: int) -> int:
    """Return the first offset at or after ``start`` that is not whitespace."""

    index = start
    while index < len(text) and text[index].isspace():
        index += 1
    return index


def extract_word(text: str, start: int) -> str:
    """Return the run of non-whitespace characters beginning at ``start``."""

    end = start
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[start:end].strip()
