"""Image records stored alongside the text of a book.

The markup only refers to an image through its record index; the bytes kept
here are handed untouched to the container packer.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Union

from PIL import Image, UnidentifiedImageError

from mobi_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_SAVE_FORMAT = "JPEG"

ImageSource = Union[bytes, bytearray, str, Path, Image.Image]


@dataclass(slots=True)
class ImageRecord:
    """Opaque image payload registered with a content buffer."""

    media_type: str
    binary_data: bytes
    size: int
    metadata: Dict[str, object] = field(default_factory=dict)


def create_image_record(source: ImageSource) -> ImageRecord:
    """Build an :class:`ImageRecord` from raw bytes, a file path or a Pillow image."""
    if isinstance(source, Image.Image):
        return _record_from_image(source)
    if isinstance(source, (bytes, bytearray)):
        return _record_from_bytes(bytes(source), "<bytes>")

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")
    record = _record_from_bytes(path.read_bytes(), str(path))
    record.metadata["filename"] = path.name
    return record


def _record_from_bytes(data: bytes, label: str) -> ImageRecord:
    try:
        with Image.open(io.BytesIO(data)) as probe:
            image_format = probe.format
            width, height = probe.size
            probe.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValueError(f"Unreadable image data: {label}") from exc

    LOGGER.debug("Registered %s image %dx%d (%d bytes) from %s", image_format, width, height, len(data), label)
    return ImageRecord(
        media_type=Image.MIME.get(image_format or "", "application/octet-stream"),
        binary_data=data,
        size=len(data),
        metadata={"format": image_format, "width": width, "height": height},
    )


def _record_from_image(image: Image.Image) -> ImageRecord:
    image_format = image.format or DEFAULT_SAVE_FORMAT
    if image_format == "JPEG" and image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    data = buffer.getvalue()
    return ImageRecord(
        media_type=Image.MIME.get(image_format, "application/octet-stream"),
        binary_data=data,
        size=len(data),
        metadata={"format": image_format, "width": image.width, "height": image.height},
    )
