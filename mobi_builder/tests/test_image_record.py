"""Tests for image record creation."""
import io
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from mobi_builder.model.image_record import ImageRecord, create_image_record


def _png_bytes(size=(4, 3)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, (200, 10, 10)).save(buffer, format="PNG")
    return buffer.getvalue()


class ImageRecordTest(unittest.TestCase):
    """Byte inputs are kept as-is; Pillow images are serialised once."""

    def test_bytes_kept_untouched(self) -> None:
        data = _png_bytes()
        record = create_image_record(data)

        self.assertIsInstance(record, ImageRecord)
        self.assertEqual(record.binary_data, data)
        self.assertEqual(record.size, len(data))
        self.assertEqual(record.media_type, "image/png")
        self.assertEqual((record.metadata["width"], record.metadata["height"]), (4, 3))

    def test_path_input_records_filename(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cover.png"
            path.write_bytes(_png_bytes((8, 8)))
            record = create_image_record(path)

        self.assertEqual(record.metadata["filename"], "cover.png")
        self.assertEqual(record.metadata["format"], "PNG")

    def test_pillow_image_without_format_saved_as_jpeg(self) -> None:
        image = Image.new("RGBA", (5, 5), (0, 0, 255, 128))
        record = create_image_record(image)

        self.assertEqual(record.media_type, "image/jpeg")
        self.assertTrue(record.binary_data.startswith(b"\xff\xd8"))
        self.assertEqual(record.metadata["width"], 5)

    def test_missing_file_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            create_image_record("/nonexistent/picture.gif")

    def test_garbage_bytes_rejected(self) -> None:
        with self.assertRaises(ValueError):
            create_image_record(b"definitely not an image")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
