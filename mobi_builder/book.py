"""Book under construction: content, images and metadata of a single title."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from mobi_builder.model.content_buffer import ContentBuffer
from mobi_builder.model.document_model import ContentBundle
from mobi_builder.model.image_record import ImageRecord, ImageSource, create_image_record
from mobi_builder.model.settings import Settings
from mobi_builder.renderer.assembler import AssembledDocument, DocumentAssembler


class MobiDocument:
    """Collects text, headings and images for a single book.

    Use the ``append_*`` methods in reading order, then call :meth:`export`
    (or :meth:`get_text_data`) to obtain the resolved markup.
    """

    def __init__(self, settings: Optional[Settings] = None, assembler: Optional[DocumentAssembler] = None) -> None:
        self.settings = settings or Settings()
        self.buffer = ContentBuffer()
        self._assembler = assembler or DocumentAssembler()

    # ------------------------------------------------------------------
    # Metadata
    def set(self, key: str, value: Any) -> None:
        self.settings.set(key, value)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.settings.get(key, default)

    # ------------------------------------------------------------------
    # Content
    def append_paragraph(self, text: str) -> None:
        self.buffer.append_paragraph(text)

    def append_chapter_title(self, title: str) -> None:
        self.buffer.append_chapter_title(title)

    def append_section_title(self, title: str) -> None:
        self.buffer.append_section_title(title)

    def append_page_break(self) -> None:
        self.buffer.append_page_break()

    def append_image(self, image: ImageRecord | ImageSource) -> int:
        record = image if isinstance(image, ImageRecord) else create_image_record(image)
        return self.buffer.append_image(record)

    # ------------------------------------------------------------------
    # Output
    def assemble(self) -> AssembledDocument:
        return self._assembler.assemble_result(self.buffer.elements, self.settings)

    def get_text_data(self) -> str:
        return self._assembler.assemble(self.buffer.elements, self.settings)

    def get_images(self) -> List[ImageRecord]:
        return list(self.buffer.images)

    def get_metadata(self) -> Dict[str, Any]:
        return self.settings.as_metadata()

    def export(self) -> ContentBundle:
        return ContentBundle(markup=self.get_text_data(), images=self.get_images(), metadata=self.get_metadata())
