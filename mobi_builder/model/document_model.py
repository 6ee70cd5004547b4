"""Aggregate handed to the container packer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from mobi_builder.model.image_record import ImageRecord
from mobi_builder.utils.encoding import MARKUP_ENCODING


@dataclass(slots=True)
class ContentBundle:
    """Markup, ordered image records and metadata consumed by the packer."""

    markup: str
    images: List[ImageRecord] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def markup_bytes(self) -> bytes:
        return self.markup.encode(MARKUP_ENCODING)
