"""Common helpers shared by the markup and table-of-contents renderers."""
from __future__ import annotations

import html

from mobi_builder.renderer.errors import OffsetOverflow

OFFSET_WIDTH = 10


def format_offset(value: int, width: int = OFFSET_WIDTH) -> str:
    """Serialise a non-negative integer as a zero-padded fixed-width decimal field."""
    if value < 0:
        raise ValueError(f"Offsets cannot be negative: {value}")
    field = str(value).zfill(width)
    if len(field) > width:
        raise OffsetOverflow(value, width)
    return field


def prepare_text(text: str, escape: bool) -> str:
    return html.escape(text, quote=True) if escape else text
