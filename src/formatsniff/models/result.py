"""Sniffing result models."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from formatsniff.models.formats import DataFormat


class SniffMetadata(BaseModel):
    """Information gathered about the input while sniffing it."""

    filename: str
    file_path: Path | None = None
    file_size: int | None = None
    extension: str | None = None
    mime_type: str | None = None

    # Processing info
    elapsed_ms: float | None = None
    warnings: list[str] = Field(default_factory=list)


class SniffResult(BaseModel):
    """Complete sniffing result."""

    success: bool
    format: DataFormat | None = None
    matches: dict[str, bool] = Field(default_factory=dict)

    metadata: SniffMetadata

    # Error handling
    error: str | None = None

    @property
    def label(self) -> str:
        """Human readable format label, 'unknown' when nothing matched."""
        return self.format.value if self.format else "unknown"

    def to_dict(self) -> dict[str, Any]:
        """Return full result as a JSON-compatible dictionary."""
        return self.model_dump(mode="json")
