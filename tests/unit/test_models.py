"""Tests for data models in src/formatsniff/models/."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

import formatsniff
from formatsniff.models.config import SniffConfig
from formatsniff.models.formats import PRECEDENCE, DataFormat
from formatsniff.models.result import SniffMetadata, SniffResult


# ===========================================================================
# DataFormat
# ===========================================================================


class TestDataFormat:
    """Tests for the DataFormat enum."""

    def test_members_are_closed_set(self):
        assert {f.value for f in DataFormat} == {"json", "yaml", "xml", "html", "plain text"}

    def test_members_compare_equal_to_values(self):
        assert DataFormat.JSON == "json"
        assert str(DataFormat.PLAIN_TEXT) == "plain text"

    def test_precedence_order(self):
        assert PRECEDENCE == (
            DataFormat.JSON,
            DataFormat.XML,
            DataFormat.HTML,
            DataFormat.YAML,
            DataFormat.PLAIN_TEXT,
        )

    def test_module_level_constants(self):
        assert formatsniff.JSON is DataFormat.JSON
        assert formatsniff.PLAIN_TEXT is DataFormat.PLAIN_TEXT

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (DataFormat.XML, DataFormat.XML),
            ("json", DataFormat.JSON),
            ("JSON", DataFormat.JSON),
            ("plain text", DataFormat.PLAIN_TEXT),
            ("plain-text", DataFormat.PLAIN_TEXT),
            ("PLAIN_TEXT", DataFormat.PLAIN_TEXT),
            ("plaintext", DataFormat.PLAIN_TEXT),
            ("text", DataFormat.PLAIN_TEXT),
            ("yml", DataFormat.YAML),
            (" html ", DataFormat.HTML),
        ],
    )
    def test_parse(self, value, expected):
        assert DataFormat.parse(value) is expected

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown data format"):
            DataFormat.parse("csv")


# ===========================================================================
# SniffConfig
# ===========================================================================


class TestSniffConfig:
    """Tests for SniffConfig."""

    def test_defaults(self):
        config = SniffConfig()
        assert config.max_input_size_mb == 10
        assert config.max_input_bytes == 10 * 1024 * 1024
        assert config.skip_binary is True
        assert config.disabled_formats == []
        assert config.raise_on_error is False
        assert config.max_workers == 4

    def test_disabled_formats_are_parsed(self):
        config = SniffConfig(disabled_formats=["xml", "plain-text"])
        assert config.disabled_formats == [DataFormat.XML, DataFormat.PLAIN_TEXT]

    def test_unknown_disabled_format_is_rejected(self):
        with pytest.raises(ValidationError):
            SniffConfig(disabled_formats=["csv"])

    def test_non_positive_size_is_rejected(self):
        with pytest.raises(ValidationError):
            SniffConfig(max_input_size_mb=0)

    def test_zero_workers_is_rejected(self):
        with pytest.raises(ValidationError):
            SniffConfig(max_workers=0)

    def test_strict_preset(self):
        config = SniffConfig.strict()
        assert config.raise_on_error is True
        assert config.skip_binary is True


# ===========================================================================
# SniffResult
# ===========================================================================


class TestSniffResult:
    """Tests for SniffResult and SniffMetadata."""

    def test_label_for_detected_format(self):
        result = SniffResult(
            success=True,
            format=DataFormat.YAML,
            metadata=SniffMetadata(filename="a.yaml"),
        )
        assert result.label == "yaml"

    def test_label_without_format(self):
        result = SniffResult(success=False, error="boom", metadata=SniffMetadata(filename="x"))
        assert result.label == "unknown"

    def test_to_dict_is_json_serialisable(self):
        result = SniffResult(
            success=True,
            format=DataFormat.PLAIN_TEXT,
            matches={"json": False, "plain text": True},
            metadata=SniffMetadata(filename="a.txt", file_path=Path("/tmp/a.txt"), file_size=3),
        )
        data = result.to_dict()
        assert data["format"] == "plain text"
        assert data["metadata"]["file_path"] == "/tmp/a.txt"
        assert json.loads(json.dumps(data)) == data

    def test_metadata_warnings_are_independent(self):
        first = SniffMetadata(filename="a")
        second = SniffMetadata(filename="b")
        first.warnings.append("w")
        assert second.warnings == []
