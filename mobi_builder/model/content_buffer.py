"""Append-only store of content elements and the images they reference."""
from __future__ import annotations

from typing import Iterator, List, Tuple

from mobi_builder.model.elements import ContentElement, Heading, ImageRef, PageBreak, Paragraph
from mobi_builder.model.image_record import ImageRecord


class ContentBuffer:
    """Ordered sequence of content elements plus the image registry."""

    def __init__(self) -> None:
        self._elements: List[ContentElement] = []
        self._images: List[ImageRecord] = []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ContentElement]:
        return iter(self._elements)

    @property
    def elements(self) -> Tuple[ContentElement, ...]:
        return tuple(self._elements)

    @property
    def images(self) -> Tuple[ImageRecord, ...]:
        return tuple(self._images)

    def append_paragraph(self, text: str) -> None:
        self._elements.append(Paragraph(text))

    def append_heading(self, level: int, text: str) -> None:
        self._elements.append(Heading(level, text))

    def append_chapter_title(self, text: str) -> None:
        self.append_heading(2, text)

    def append_section_title(self, text: str) -> None:
        self.append_heading(3, text)

    def append_page_break(self) -> None:
        self._elements.append(PageBreak())

    def append_image(self, record: ImageRecord) -> int:
        """Register ``record`` and reference it from the current position.

        Returns the registry index, which is also the index carried by the
        :class:`ImageRef` element.
        """
        index = len(self._images)
        self._images.append(record)
        self._elements.append(ImageRef(index))
        return index
