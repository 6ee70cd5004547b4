"""Fixed-width table of contents whose entries point at heading offsets."""
from __future__ import annotations

from typing import Iterable, List

from mobi_builder.model.elements import HeadingRecord
from mobi_builder.renderer.markup_renderer import PAGE_BREAK_MARKUP
from mobi_builder.renderer.utils import format_offset, prepare_text

TOC_HEADER = "<h2>Contents</h2><blockquote><table summary='Table of Contents'><col/><tbody>"
TOC_FOOTER = "</tbody></table></blockquote>" + PAGE_BREAK_MARKUP


class TocBuilder:
    """Emit one table row per heading, in the order the headings were met.

    Every offset is written as a fixed-width field, so the byte length of the
    output does not depend on ``base`` as long as no offset gains a digit.
    """

    def __init__(self, escape_text: bool = False) -> None:
        self._escape_text = escape_text

    def build(self, headings: Iterable[HeadingRecord], base: int = 0) -> str:
        parts: List[str] = [TOC_HEADER]
        for heading in headings:
            filepos = format_offset(heading.offset + base)
            title = prepare_text(heading.title, self._escape_text)
            parts.append(f"<tr><td><a href='#{heading.anchor_id}' filepos={filepos}>{title}</a></td></tr>")
        parts.append(TOC_FOOTER)
        return "".join(parts)
