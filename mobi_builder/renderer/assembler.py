"""Assemble the full markup stream of a book.

The table of contents sits in front of the body, so the absolute offset of
each heading depends on the length of the table, which in turn contains those
offsets. The table is rendered once against base 0 to measure it, then again
against the real base; fixed-width offset fields keep both renderings the
same length.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from mobi_builder.model.elements import ContentElement, HeadingRecord
from mobi_builder.model.settings import Settings
from mobi_builder.renderer.errors import LayoutInconsistency
from mobi_builder.renderer.markup_renderer import MarkupRenderer
from mobi_builder.renderer.toc_builder import TocBuilder
from mobi_builder.renderer.utils import format_offset, prepare_text
from mobi_builder.utils.encoding import byte_length
from mobi_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

DOCUMENT_PREFIX = (
    "<html><head><guide><reference title='CONTENT' type='toc' "
    f"filepos={format_offset(0)} /></guide></head><body>"
)
DOCUMENT_SUFFIX = "</body></html>"


@dataclass(slots=True)
class AssembledDocument:
    """Final markup plus the absolute heading offsets used in the table of contents."""

    markup: str
    headings: List[HeadingRecord] = field(default_factory=list)
    toc_base: Optional[int] = None

    @property
    def byte_length(self) -> int:
        return byte_length(self.markup)


class DocumentAssembler:
    """Two-pass renderer producing ``prefix + toc + title + body + suffix``."""

    def __init__(
        self,
        renderer: Optional[MarkupRenderer] = None,
        toc_builder: Optional[TocBuilder] = None,
        escape_text: bool = False,
    ) -> None:
        self._renderer = renderer or MarkupRenderer(escape_text=escape_text)
        self._toc_builder = toc_builder or TocBuilder(escape_text=escape_text)
        self._escape_text = escape_text

    def assemble(self, elements: Iterable[ContentElement], settings: Settings) -> str:
        return self.assemble_result(elements, settings).markup

    def assemble_result(self, elements: Iterable[ContentElement], settings: Settings) -> AssembledDocument:
        body = self._renderer.render(elements)
        title_markup = f"<h1>{prepare_text(settings.title, self._escape_text)}</h1>"

        toc = ""
        base: Optional[int] = None
        if settings.toc:
            provisional = self._toc_builder.build(body.headings, base=0)
            base = byte_length(DOCUMENT_PREFIX) + byte_length(provisional) + byte_length(title_markup)
            toc = self._toc_builder.build(body.headings, base=base)
            if byte_length(toc) != byte_length(provisional):
                raise LayoutInconsistency(byte_length(provisional), byte_length(toc))
            LOGGER.debug("Resolved table of contents: %d entries, body starts at byte %d", len(body.headings), base)

        markup = "".join((DOCUMENT_PREFIX, toc, title_markup, body.markup, DOCUMENT_SUFFIX))
        shift = base if base is not None else byte_length(DOCUMENT_PREFIX) + byte_length(title_markup)
        headings = [
            HeadingRecord(level=h.level, title=h.title, offset=h.offset + shift, anchor_id=h.anchor_id)
            for h in body.headings
        ]
        return AssembledDocument(markup=markup, headings=headings, toc_base=base)
