"""Tests for the document facade and the packer bundle."""
import io
import unittest

from PIL import Image

from mobi_builder.book import MobiDocument
from mobi_builder.model.document_model import ContentBundle
from mobi_builder.model.image_record import ImageRecord
from mobi_builder.renderer.assembler import DOCUMENT_PREFIX


class MobiDocumentTest(unittest.TestCase):
    """Document exposes markup, image records and metadata for packing."""

    def _document(self) -> MobiDocument:
        document = MobiDocument()
        document.set("title", "My Book")
        document.set("author", "John Doe")
        document.append_paragraph("Hi")
        document.append_chapter_title("Intro")
        document.append_paragraph("Body text")
        return document

    def test_text_data_matches_assembled_markup(self) -> None:
        document = self._document()
        markup = document.get_text_data()

        self.assertTrue(markup.startswith(DOCUMENT_PREFIX))
        self.assertIn("filepos=0000000311>Intro</a>", markup)
        self.assertEqual(markup, document.get_text_data())

    def test_metadata_includes_pass_through_keys(self) -> None:
        document = self._document()
        self.assertEqual(document.get("author"), "John Doe")
        self.assertEqual(document.get_metadata(), {"title": "My Book", "toc": True, "author": "John Doe"})

    def test_images_accept_records_and_raw_sources(self) -> None:
        document = MobiDocument()
        record = ImageRecord(media_type="image/gif", binary_data=b"GIF89a", size=6)
        buffer = io.BytesIO()
        Image.new("L", (2, 2)).save(buffer, format="GIF")

        self.assertEqual(document.append_image(record), 0)
        self.assertEqual(document.append_image(buffer.getvalue()), 1)

        images = document.get_images()
        self.assertIs(images[0], record)
        self.assertEqual(images[1].media_type, "image/gif")
        markup = document.get_text_data()
        self.assertIn("<img recindex=0000000001 />", markup)
        self.assertIn("<img recindex=0000000002 />", markup)

    def test_export_bundle(self) -> None:
        document = self._document()
        document.append_page_break()
        document.append_section_title("Más")
        bundle = document.export()

        self.assertIsInstance(bundle, ContentBundle)
        self.assertEqual(bundle.markup, document.get_text_data())
        self.assertEqual(bundle.markup_bytes, bundle.markup.encode("utf-8"))
        self.assertEqual(bundle.images, [])
        self.assertEqual(bundle.metadata["title"], "My Book")

    def test_assemble_reports_absolute_heading_offsets(self) -> None:
        document = self._document()
        document.append_section_title("Détail")
        assembled = document.assemble()
        encoded = assembled.markup.encode("utf-8")

        for heading in assembled.headings:
            self.assertIn(f"id='{heading.anchor_id}'".encode(), encoded[heading.offset:heading.offset + 60])

    def test_toc_toggle(self) -> None:
        document = self._document()
        document.set("toc", False)
        self.assertNotIn("<table", document.get_text_data())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
