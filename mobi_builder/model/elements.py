"""In-memory representation of book content prior to markup rendering."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from mobi_builder.utils.encoding import byte_length

HEADING_LEVELS = (2, 3)


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A run of body text rendered as a single paragraph."""

    text: str


@dataclass(frozen=True, slots=True)
class Heading:
    """Chapter (level 2) or section (level 3) title listed in the table of contents."""

    level: int
    text: str

    def __post_init__(self) -> None:
        if self.level not in HEADING_LEVELS:
            raise ValueError(f"Unsupported heading level {self.level}; expected one of {HEADING_LEVELS}")


@dataclass(frozen=True, slots=True)
class PageBreak:
    """Forces the reader to start a new page."""


@dataclass(frozen=True, slots=True)
class ImageRef:
    """Non-owning reference into the image registry of the owning buffer."""

    index: int


ContentElement = Union[Paragraph, Heading, PageBreak, ImageRef]


@dataclass(slots=True)
class HeadingRecord:
    """Position of a heading inside the rendered body."""

    level: int
    title: str
    offset: int
    anchor_id: str


@dataclass(slots=True)
class RenderResult:
    """Body markup together with the headings found while producing it."""

    markup: str
    headings: List[HeadingRecord] = field(default_factory=list)

    @property
    def byte_length(self) -> int:
        return byte_length(self.markup)
