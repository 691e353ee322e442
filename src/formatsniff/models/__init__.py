"""formatsniff data models."""
from formatsniff.models.config import SniffConfig
from formatsniff.models.formats import PRECEDENCE, DataFormat
from formatsniff.models.result import SniffMetadata, SniffResult

__all__ = [
    "DataFormat",
    "PRECEDENCE",
    "SniffConfig",
    "SniffMetadata",
    "SniffResult",
]
