"""Byte measurement of markup in the encoding of the final stream."""
from __future__ import annotations

MARKUP_ENCODING = "utf-8"


def byte_length(text: str) -> int:
    """Length of ``text`` once encoded into the markup stream."""
    return len(text.encode(MARKUP_ENCODING))
