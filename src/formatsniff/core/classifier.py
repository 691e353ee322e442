"""Single-label classification on top of the format predicates."""
from __future__ import annotations

from typing import TYPE_CHECKING

# Ensure predicates are registered
import formatsniff.core.predicates  # noqa: F401
from formatsniff.core.registry import FormatRegistry
from formatsniff.models.config import SniffConfig
from formatsniff.utils.logging import get_logger

if TYPE_CHECKING:
    from formatsniff.core.predicates import ByteLike
    from formatsniff.models.formats import DataFormat

logger = get_logger(__name__)


class FormatClassifier:
    """Pick one format label by evaluating predicates in precedence order."""

    def __init__(self, config: SniffConfig | None = None) -> None:
        self.config = config or SniffConfig()

    def classify(self, data: "ByteLike") -> "DataFormat | None":
        """Return the first matching format, or None if nothing matched.

        Only empty input (or input whose formats are all disabled) yields
        None, since plain text is the fallback for everything non-empty.
        """
        for fmt, predicate in FormatRegistry.ordered(self.config.disabled_formats):
            if predicate(data):
                logger.debug("Classified %d-unit input as %s", len(data), fmt.value)
                return fmt

        logger.debug("No format matched %d-unit input", len(data))
        return None

    def matches(self, data: "ByteLike") -> dict["DataFormat", bool]:
        """Evaluate every enabled predicate independently."""
        return {
            fmt: predicate(data)
            for fmt, predicate in FormatRegistry.ordered(self.config.disabled_formats)
        }


def classify(
    data: "ByteLike",
    config: SniffConfig | None = None,
) -> "DataFormat | None":
    """Classify a buffer as JSON, XML, HTML, YAML or plain text.

    Args:
        data: Text or bytes to inspect.
        config: Optional configuration (e.g. disabled formats).

    Returns:
        The first matching DataFormat in precedence order, or None.
    """
    return FormatClassifier(config).classify(data)
