"""MIME detection using python-magic and file extensions."""
from __future__ import annotations

from pathlib import Path

import magic

_TEXTUAL_APPLICATION_TYPES = frozenset({
    "application/json",
    "application/x-ndjson",
    "application/xml",
    "application/xhtml+xml",
    "application/yaml",
    "application/x-yaml",
    "application/javascript",
    "application/x-empty",
    "inode/x-empty",
})


class MimeDetector:
    """Detect MIME type from content and extension from filename."""

    def __init__(self) -> None:
        self._mime = magic.Magic(mime=True)

    def detect(
        self,
        content: bytes | None = None,
        filename: str | None = None,
    ) -> tuple[str | None, str | None]:
        """Detect format returning (extension, mimetype).

        Args:
            content: Raw bytes for magic detection.
            filename: Filename for extension-based detection.

        Returns:
            Tuple of (extension, mimetype). Either may be None.
        """
        extension = None
        mimetype = None

        if filename:
            extension = Path(filename).suffix.lower() or None

        if content:
            mimetype = self._mime.from_buffer(content)

        return extension, mimetype

    @staticmethod
    def is_textual_mimetype(mimetype: str | None) -> bool:
        """Check whether a MIME type names a text-based format."""
        if not mimetype:
            return False
        mimetype = mimetype.split(";", 1)[0].strip().lower()
        if mimetype.startswith("text/"):
            return True
        if mimetype.endswith(("+xml", "+json")):
            return True
        return mimetype in _TEXTUAL_APPLICATION_TYPES

    @classmethod
    def is_binary(cls, content: bytes, mimetype: str | None) -> bool:
        """Check whether content is binary rather than text.

        NUL bytes always mean binary. Otherwise a textual MIME type wins, and
        anything else counts as binary only if it is not valid UTF-8.
        """
        if not content:
            return False
        if b"\x00" in content:
            return True
        if cls.is_textual_mimetype(mimetype):
            return False
        try:
            content.decode("utf-8")
        except UnicodeDecodeError:
            return True
        return False
