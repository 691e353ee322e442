"""Sniffing configuration."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from formatsniff.models.formats import DataFormat


class SniffConfig(BaseModel):
    """Main sniffing configuration."""

    # Input limits
    max_input_size_mb: float = Field(default=10, gt=0)
    skip_binary: bool = True

    # Classification
    disabled_formats: list[DataFormat] = Field(default_factory=list)
    include_matches: bool = True

    # Error handling
    raise_on_error: bool = False

    # Performance
    max_workers: int = Field(default=4, ge=1)

    @field_validator("disabled_formats", mode="before")
    @classmethod
    def _parse_formats(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set)):
            return [DataFormat.parse(v) for v in value]
        return value

    @property
    def max_input_bytes(self) -> int:
        return int(self.max_input_size_mb * 1024 * 1024)

    @classmethod
    def strict(cls) -> "SniffConfig":
        """Preset for pipelines that must not guess on bad input."""
        return cls(skip_binary=True, raise_on_error=True)
