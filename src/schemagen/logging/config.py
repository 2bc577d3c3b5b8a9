"""
Logging configuration for SchemaGen.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Any, TextIO

from schemagen.logging.context import ContextFilter
from schemagen.logging.formatters import JSONFormatter, TextFormatter

ROOT_LOGGER_NAME = "schemagen"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    TEXT = "text"


class SchemaGenLogger:
    """
    Logger wrapper that accepts structured fields as keyword arguments.

    Example:
        logger = SchemaGenLogger("schemagen.editor")
        logger.info("Model saved", record_id="abc", property_count=3)
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.log(level, msg, *args, extra=kwargs.copy())

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)


def get_logger(name: str) -> SchemaGenLogger:
    """
    Get a SchemaGen logger by name.

    Args:
        name: Logger name (typically module name, e.g., "schemagen.codegen")
    """
    return SchemaGenLogger(name)


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    format: LogFormat | str = LogFormat.JSON,
    output: TextIO | None = None,
    include_context: bool = True,
    use_colors: bool = True,
) -> None:
    """
    Configure SchemaGen logging.

    Replaces any handlers on the "schemagen" logger with a single stream
    handler. Should be called once at application startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format (json for production, text for development)
        output: Output stream (defaults to stderr)
        include_context: Whether to include context fields in logs
        use_colors: Whether to use colors in text format (ignored for JSON)

    Example:
        configure_logging(level="DEBUG", format="text")
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())

    if isinstance(format, str):
        format = LogFormat(format.lower())

    if output is None:
        output = sys.stderr

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.value))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(output)
    handler.setLevel(getattr(logging, level.value))

    if format == LogFormat.JSON:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = TextFormatter(use_colors=use_colors)

    handler.setFormatter(formatter)

    if include_context:
        handler.addFilter(ContextFilter())

    root_logger.addHandler(handler)
    root_logger.propagate = False
