"""Predicate registry keyed by data format."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from formatsniff.models.formats import PRECEDENCE, DataFormat

if TYPE_CHECKING:
    from formatsniff.core.predicates import ByteLike

    Predicate = Callable[[ByteLike], bool]


class FormatRegistry:
    """Registry mapping each data format to its content predicate."""

    _predicates: dict[DataFormat, "Predicate"] = {}

    @classmethod
    def register(cls, fmt: DataFormat | str) -> Callable[["Predicate"], "Predicate"]:
        """Register a predicate for a format.

        Used as a decorator:
            @FormatRegistry.register(DataFormat.JSON)
            def is_json(data): ...
        """
        data_format = DataFormat.parse(fmt)

        def decorator(predicate: "Predicate") -> "Predicate":
            cls._predicates[data_format] = predicate
            return predicate

        return decorator

    @classmethod
    def get_predicate(cls, fmt: DataFormat | str) -> "Predicate | None":
        """Get the predicate registered for a format."""
        return cls._predicates.get(DataFormat.parse(fmt))

    @classmethod
    def ordered(
        cls,
        disabled: Iterable[DataFormat | str] = (),
    ) -> list[tuple[DataFormat, "Predicate"]]:
        """Registered predicates in precedence order, minus disabled formats."""
        skip = {DataFormat.parse(f) for f in disabled}
        return [
            (fmt, cls._predicates[fmt])
            for fmt in PRECEDENCE
            if fmt in cls._predicates and fmt not in skip
        ]

    @classmethod
    def list_formats(cls) -> list[dict]:
        """List registered formats in precedence order."""
        return [
            {
                "name": fmt.name,
                "value": fmt.value,
                "rank": rank,
                "predicate": predicate.__name__,
            }
            for rank, (fmt, predicate) in enumerate(cls.ordered(), start=1)
        ]
