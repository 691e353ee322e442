"""Logging configuration for formatsniff.

Adapted from CAMEL-AI (https://github.com/camel-ai/camel)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

import logging
import os
import sys

_logger = logging.getLogger("formatsniff")


def _configure_library_logging() -> None:
    """Configure default logging for formatsniff."""
    if _logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    _logger.addHandler(handler)
    _logger.setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the 'formatsniff' package logger.

    Args:
        name: Module name. A leading 'formatsniff.' is not duplicated.

    Returns:
        A logger instance named 'formatsniff.{name}'.
    """
    if name == "formatsniff" or name.startswith("formatsniff."):
        return logging.getLogger(name)
    return logging.getLogger(f"formatsniff.{name}")


def set_log_level(level: str | int) -> None:
    """Set the logging level for formatsniff.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', logging.DEBUG).
    """
    if isinstance(level, str):
        level = level.upper()
    _logger.setLevel(level)
    for handler in _logger.handlers:
        handler.setLevel(level)


if os.environ.get("FORMATSNIFF_LOGGING_DISABLED", "false").lower() != "true":
    _configure_library_logging()
