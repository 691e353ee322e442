"""Main sniffing engine."""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import BinaryIO, Iterator

from formatsniff.core.classifier import FormatClassifier
from formatsniff.core.detector import MimeDetector
from formatsniff.core.errors import (
    BinaryContentError,
    InputTooLargeError,
    SniffError,
    SourceNotFoundError,
    SourceReadError,
)
from formatsniff.models.config import SniffConfig
from formatsniff.models.result import SniffMetadata, SniffResult
from formatsniff.utils.logging import get_logger

logger = get_logger(__name__)


class SniffEngine:
    """Read inputs, guard them, and classify their data format."""

    def __init__(self, config: SniffConfig | None = None) -> None:
        self.config = config or SniffConfig()
        self._classifier = FormatClassifier(self.config)
        self._detector = MimeDetector()

    def sniff(
        self,
        source: str | Path | BinaryIO | bytes,
        filename: str | None = None,
    ) -> SniffResult:
        """Classify a single input.

        A ``str`` source is a file path; pass raw content as ``bytes``.
        """
        start_time = time.perf_counter()

        if isinstance(source, str):
            source = Path(source)
        if isinstance(source, Path):
            filename = filename or source.name

        try:
            content, file_path = self._read(source)

            extension, mimetype = self._detector.detect(
                content=content, filename=filename
            )
            if self.config.skip_binary and self._detector.is_binary(content, mimetype):
                raise BinaryContentError(mimetype)

            matches = {}
            if self.config.include_matches:
                verdicts = self._classifier.matches(content)
                # Verdicts are precedence-ordered, so the first hit is the label.
                data_format = next((f for f, ok in verdicts.items() if ok), None)
                matches = {fmt.value: matched for fmt, matched in verdicts.items()}
            else:
                data_format = self._classifier.classify(content)

        except SniffError as e:
            if self.config.raise_on_error:
                raise
            logger.info("Sniffing %s failed: %s", filename or "input", e)
            return self._error_result(str(e), filename)

        metadata = SniffMetadata(
            filename=filename or "unknown",
            file_path=file_path,
            file_size=len(content),
            extension=extension,
            mime_type=mimetype,
            elapsed_ms=(time.perf_counter() - start_time) * 1000,
        )
        if data_format is None:
            metadata.warnings.append("No format matched (empty input?)")

        return SniffResult(
            success=True,
            format=data_format,
            matches=matches,
            metadata=metadata,
        )

    def sniff_batch(
        self,
        sources: list[str | Path],
        show_progress: bool = True,
        skip_failed: bool = False,
    ) -> Iterator[tuple[str | Path, SniffResult]]:
        """Sniff multiple inputs in parallel, yielding results as they finish."""
        from rich.progress import Progress, SpinnerColumn, TextColumn

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                executor.submit(self.sniff, src): src
                for src in sources
            }

            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                disable=not show_progress,
            ) as progress:
                task = progress.add_task("Sniffing...", total=len(sources))
                for future in as_completed(futures):
                    source = futures[future]
                    try:
                        result = future.result()
                    except SniffError as e:
                        if skip_failed:
                            progress.advance(task)
                            continue
                        result = self._error_result(str(e), str(source))
                    progress.advance(task)
                    if skip_failed and not result.success:
                        continue
                    yield source, result

    def _read(self, source: Path | BinaryIO | bytes) -> tuple[bytes, Path | None]:
        """Read source into bytes, enforcing the size limit."""
        limit = self.config.max_input_bytes

        if isinstance(source, Path):
            if not source.is_file():
                raise SourceNotFoundError(f"File not found: {source}")
            try:
                size = source.stat().st_size
                if size > limit:
                    raise InputTooLargeError(size, limit)
                content = source.read_bytes()
            except OSError as e:
                raise SourceReadError(f"Cannot read {source}: {e}") from e
            return content, source

        if isinstance(source, (bytes, bytearray, memoryview)):
            content = bytes(source)
        else:
            try:
                # One byte past the limit is enough to know it is too large.
                content = source.read(limit + 1)
            except OSError as e:
                raise SourceReadError(f"Cannot read input: {e}") from e
            if isinstance(content, str):
                content = content.encode("utf-8")

        if len(content) > limit:
            raise InputTooLargeError(len(content), limit)
        return content, None

    def _error_result(
        self,
        error: str,
        filename: str | None,
    ) -> SniffResult:
        """Create error result."""
        return SniffResult(
            success=False,
            error=error,
            metadata=SniffMetadata(
                filename=filename or "unknown",
            ),
        )


# Convenience function
def sniff(
    source: str | Path | BinaryIO | bytes,
    filename: str | None = None,
    config: SniffConfig | None = None,
) -> SniffResult:
    """Detect the data format of a file, stream or byte buffer.

    Args:
        source: File path, file-like object, or raw bytes
        filename: Original filename (reported in metadata)
        config: Sniffing configuration

    Returns:
        SniffResult with the detected format and per-predicate matches
    """
    engine = SniffEngine(config)
    return engine.sniff(source, filename)
