"""Parse plain-text book outlines into a :class:`MobiDocument`.

Outline syntax:

- ``% Title`` on the first non-blank line sets the book title, unless the
  settings passed in already carry one
- ``## Chapter`` and ``### Section`` start headings
- ``---`` on its own line inserts a page break
- ``![caption](relative/path.png)`` on its own line embeds an image
- any other block of lines separated by blank lines is a paragraph
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional

from mobi_builder.book import MobiDocument
from mobi_builder.model.settings import DEFAULT_TITLE, Settings
from mobi_builder.utils.logger import get_logger

LOGGER = get_logger(__name__)

TITLE_PATTERN = re.compile(r"^%\s+(?P<title>.+)$")
HEADING_PATTERN = re.compile(r"^(?P<marks>#{2,3})\s+(?P<text>.+?)(?:\s+#+)?\s*$")
IMAGE_PATTERN = re.compile(r"^!\[(?P<alt>[^\]]*)\]\((?P<path>[^)]+)\)$")
PAGE_BREAK_PATTERN = re.compile(r"^-{3,}$")
WHITESPACE_PATTERN = re.compile(r"\s+")


class OutlineParser:
    """Turns outline text into document elements, line by line."""

    def __init__(self, base_dir: Optional[Path] = None, settings: Optional[Settings] = None) -> None:
        self._base_dir = base_dir or Path.cwd()
        self._settings = settings

    def parse(self, text: str) -> MobiDocument:
        settings = self._settings.copy() if self._settings is not None else Settings()
        document = MobiDocument(settings=settings)
        paragraph: List[str] = []
        seen_content = False

        def flush() -> None:
            if paragraph:
                document.append_paragraph(WHITESPACE_PATTERN.sub(" ", " ".join(paragraph)).strip())
                paragraph.clear()

        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line:
                flush()
                continue

            title_match = TITLE_PATTERN.match(line)
            if title_match and not seen_content:
                if document.get("title") == DEFAULT_TITLE:
                    document.set("title", title_match.group("title").strip())
                seen_content = True
                continue
            seen_content = True

            heading_match = HEADING_PATTERN.match(line)
            image_match = IMAGE_PATTERN.match(line)
            if heading_match:
                flush()
                level = len(heading_match.group("marks"))
                if level == 2:
                    document.append_chapter_title(heading_match.group("text"))
                else:
                    document.append_section_title(heading_match.group("text"))
            elif PAGE_BREAK_PATTERN.match(line):
                flush()
                document.append_page_break()
            elif image_match:
                flush()
                image_path = self._base_dir / image_match.group("path").strip()
                document.append_image(image_path)
            else:
                paragraph.append(line)

        flush()
        LOGGER.debug("Parsed outline into %d elements and %d images", len(document.buffer), len(document.get_images()))
        return document


def load_outline(path: Path, settings: Optional[Settings] = None) -> MobiDocument:
    """Read an outline file; image paths resolve relative to its directory."""
    if not path.exists():
        raise FileNotFoundError(f"Outline file not found: {path}")
    text = path.read_text(encoding="utf-8")
    return OutlineParser(base_dir=path.parent, settings=settings).parse(text)
