"""Render content elements into the markup body of a book."""
from __future__ import annotations

from typing import Iterable, List

from mobi_builder.model.elements import (
    ContentElement,
    Heading,
    HeadingRecord,
    ImageRef,
    PageBreak,
    Paragraph,
    RenderResult,
)
from mobi_builder.renderer.utils import format_offset, prepare_text
from mobi_builder.utils.encoding import byte_length
from mobi_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

PAGE_BREAK_MARKUP = "<mbp:pagebreak/>"
ANCHOR_PREFIX = "title_"


def anchor_id_for(index: int) -> str:
    """Anchor identifier of the element at ``index`` in the content buffer."""
    return f"{ANCHOR_PREFIX}{index}"


class MarkupRenderer:
    """Produce body markup and record the byte offset of every heading.

    Offsets are relative to the first byte of the body and count bytes of the
    encoded markup, not characters.
    """

    def __init__(self, escape_text: bool = False) -> None:
        self._escape_text = escape_text

    def render(self, elements: Iterable[ContentElement]) -> RenderResult:
        fragments: List[str] = []
        headings: List[HeadingRecord] = []
        position = 0

        for index, element in enumerate(elements):
            if isinstance(element, Heading):
                anchor_id = anchor_id_for(index)
                headings.append(
                    HeadingRecord(level=element.level, title=element.text, offset=position, anchor_id=anchor_id)
                )
                fragment = self._heading(element, anchor_id)
            else:
                fragment = self._fragment(element)
            fragments.append(fragment)
            position += byte_length(fragment)

        LOGGER.debug("Rendered %d elements into %d bytes (%d headings)", len(fragments), position, len(headings))
        return RenderResult(markup="".join(fragments), headings=headings)

    def _fragment(self, element: ContentElement) -> str:
        if isinstance(element, Paragraph):
            return f"<p>{self._text(element.text)}</p>"
        if isinstance(element, PageBreak):
            return PAGE_BREAK_MARKUP
        if isinstance(element, ImageRef):
            # Record index 0 means "no image", so registry indices are shifted by one.
            return f"<img recindex={format_offset(element.index + 1)} />"
        raise TypeError(f"Unsupported content element: {type(element).__name__}")

    def _heading(self, heading: Heading, anchor_id: str) -> str:
        text = self._text(heading.text)
        if heading.level == 2:
            return f"<a name='{anchor_id}'></a><h2 id='{anchor_id}'>{text}</h2>"
        return f"<h3 id='{anchor_id}'>{text}</h3>"

    def _text(self, text: str) -> str:
        return prepare_text(text, self._escape_text)
