"""Failures raised while resolving in-document byte offsets."""
from __future__ import annotations


class MobiBuildError(Exception):
    """Base class for markup assembly failures."""


class LayoutInconsistency(MobiBuildError):
    """The final table of contents does not have the length it was measured at."""

    def __init__(self, provisional_length: int, final_length: int) -> None:
        super().__init__(
            f"Table of contents changed length between passes: {provisional_length} -> {final_length} bytes"
        )
        self.provisional_length = provisional_length
        self.final_length = final_length


class OffsetOverflow(MobiBuildError, ValueError):
    """An offset does not fit in its fixed-width decimal field."""

    def __init__(self, value: int, width: int) -> None:
        super().__init__(f"Offset {value} does not fit in a {width}-digit field")
        self.value = value
        self.width = width
