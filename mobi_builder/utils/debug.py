"""Helpers to persist resolved offsets for debugging."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from mobi_builder.book import MobiDocument
from mobi_builder.renderer.assembler import AssembledDocument
from mobi_builder.utils.encoding import MARKUP_ENCODING

SNIPPET_BYTES = 48


class DebugDumper:
    """Writes the heading table of an assembled book onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, document: MobiDocument) -> Path:
        """Persist heading offsets, image summaries and metadata as ``layout.json``.

        Each heading entry carries the bytes found at its offset so a wrong
        ``filepos`` is visible without opening the markup.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        assembled = document.assemble()
        payload = {
            "byte_length": assembled.byte_length,
            "toc_base": assembled.toc_base,
            "headings": self._heading_entries(assembled),
            "images": [
                {"recindex": index + 1, "media_type": record.media_type, "size": record.size, **record.metadata}
                for index, record in enumerate(document.get_images())
            ],
            "metadata": document.get_metadata(),
        }
        target = self.directory / "layout.json"
        # Pass-through metadata may hold values json cannot encode natively.
        target.write_text(json.dumps(payload, indent=2, default=str))
        return target

    def _heading_entries(self, assembled: AssembledDocument) -> List[Dict[str, Any]]:
        encoded = assembled.markup.encode(MARKUP_ENCODING)
        return [
            {
                "level": heading.level,
                "title": heading.title,
                "anchor_id": heading.anchor_id,
                "offset": heading.offset,
                "at_offset": encoded[heading.offset:heading.offset + SNIPPET_BYTES].decode(
                    MARKUP_ENCODING, errors="replace"
                ),
            }
            for heading in assembled.headings
        ]
