"""mtgdb.utils

String helpers used to build mtgdb.info request URLs.
"""
from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

__all__ = [
    "sanitize",
    "join_ids",
    "encode_query_text",
]


# str.isspace() also accepts the ASCII separators \x1c-\x1f, which are control characters
_CONTROL_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def _is_allowed(ch: str) -> bool:
    if ch in _CONTROL_SEPARATORS:
        return False
    return ch.isalpha() or ch.isdecimal() or ch.isspace() or ch == "-"


def sanitize(text: str) -> str:
    """Drop every character that is not a letter, digit, whitespace or hyphen.

    Order and whitespace are preserved, so the result can be embedded in a URL
    path segment as-is.  A per-character filter rather than a regex.
    """
    if not isinstance(text, str):
        return ""
    return "".join(ch for ch in text if _is_allowed(ch))


def join_ids(ids: Iterable[object]) -> str:
    """Comma-join ids for the multi-record endpoints (``/cards/1,2,3``)."""
    return ",".join(str(i) for i in ids)


def encode_query_text(text: str) -> str:
    """Percent-encode free text for the ``q=`` parameter of complex search."""
    return quote(text, safe="")
