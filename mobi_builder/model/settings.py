"""Document metadata: typed reserved keys plus pass-through extensions."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

DEFAULT_TITLE = "Unknown Title"
RESERVED_KEYS = ("title", "toc")
TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def parse_flag(value: Any) -> bool:
    """Interpret booleans, 0/1 and their common spellings; reject anything else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUE_STRINGS:
            return True
        if normalized in FALSE_STRINGS:
            return False
    raise ValueError(f"Expected a boolean flag, got {value!r}")


@dataclass(slots=True)
class Settings:
    """Metadata for a book.

    ``title`` and ``toc`` drive rendering. Any other key is kept verbatim in
    ``extensions`` and forwarded to the container packer.
    """

    title: str = DEFAULT_TITLE
    toc: bool = True
    extensions: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Settings":
        settings = cls()
        for key, value in values.items():
            settings.set(key, value)
        return settings

    def set(self, key: str, value: Any) -> None:
        if key == "title":
            self.title = str(value)
        elif key == "toc":
            self.toc = parse_flag(value)
        else:
            self.extensions[key] = value

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        if key == "title":
            return self.title
        if key == "toc":
            return self.toc
        return self.extensions.get(key, default)

    def copy(self) -> "Settings":
        """Independent copy; extension values themselves are shared."""
        return replace(self, extensions=dict(self.extensions))

    def as_metadata(self) -> Dict[str, Any]:
        """Flattened key/value view handed to the container packer."""
        metadata: Dict[str, Any] = {"title": self.title, "toc": self.toc}
        metadata.update(self.extensions)
        return metadata
