"""Exceptions raised by the sniffing engine.

The predicates themselves never raise for malformed input; these are only
raised by ``SniffEngine`` when ``SniffConfig.raise_on_error`` is set.
"""
from __future__ import annotations


class SniffError(Exception):
    """Base class for sniffing failures."""


class SourceNotFoundError(SniffError):
    """The input file does not exist."""


class SourceReadError(SniffError):
    """The input could not be read."""


class InputTooLargeError(SniffError):
    """The input exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Input exceeds max size ({size} > {limit} bytes)")
        self.size = size
        self.limit = limit


class BinaryContentError(SniffError):
    """The input is binary and cannot be classified as a text format."""

    def __init__(self, mimetype: str | None) -> None:
        super().__init__(f"Binary content ({mimetype or 'unknown type'})")
        self.mimetype = mimetype
