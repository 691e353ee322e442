"""Data format labels and their precedence."""
from __future__ import annotations

from enum import Enum


class DataFormat(str, Enum):
    """Supported data formats."""
    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    HTML = "html"
    PLAIN_TEXT = "plain text"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "DataFormat | str") -> "DataFormat":
        """Resolve a format from a member, its value or its name.

        Matching is case-insensitive, and '-'/'_' are read as spaces so
        'plain-text' and 'PLAIN_TEXT' both resolve to PLAIN_TEXT.

        Raises:
            ValueError: If the value names no known format.
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower().replace("-", " ").replace("_", " ")
        key = _ALIASES.get(key, key)
        for member in cls:
            if key in (member.value, member.name.lower().replace("_", " ")):
                return member

        known = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown data format: {value!r} (expected one of: {known})")


_ALIASES: dict[str, str] = {
    "plaintext": "plain text",
    "text": "plain text",
    "txt": "plain text",
    "yml": "yaml",
    "htm": "html",
}

# Evaluation order for a single best label: first match wins.
PRECEDENCE: tuple[DataFormat, ...] = (
    DataFormat.JSON,
    DataFormat.XML,
    DataFormat.HTML,
    DataFormat.YAML,
    DataFormat.PLAIN_TEXT,
)

JSON = DataFormat.JSON
YAML = DataFormat.YAML
XML = DataFormat.XML
HTML = DataFormat.HTML
PLAIN_TEXT = DataFormat.PLAIN_TEXT
