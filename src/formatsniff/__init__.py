"""formatsniff - Content-based data format detection for text pipelines."""
from formatsniff.core.classifier import FormatClassifier, classify
from formatsniff.core.engine import SniffEngine, sniff
from formatsniff.core.errors import SniffError
from formatsniff.core.predicates import (
    is_html,
    is_json,
    is_plain_text,
    is_xml,
    is_yaml,
)
from formatsniff.models.config import SniffConfig
from formatsniff.models.formats import (
    HTML,
    JSON,
    PLAIN_TEXT,
    PRECEDENCE,
    XML,
    YAML,
    DataFormat,
)
from formatsniff.models.result import SniffMetadata, SniffResult

try:
    from formatsniff._version import __version__
except ImportError:
    __version__ = "0.0.0-dev"

__all__ = [
    "__version__",
    "is_json",
    "is_yaml",
    "is_xml",
    "is_html",
    "is_plain_text",
    "classify",
    "sniff",
    "FormatClassifier",
    "SniffEngine",
    "SniffConfig",
    "SniffResult",
    "SniffMetadata",
    "SniffError",
    "DataFormat",
    "PRECEDENCE",
    "JSON",
    "YAML",
    "XML",
    "HTML",
    "PLAIN_TEXT",
]
