"""
SchemaGen structured logging.

Provides JSON and text formatting with context injection.
"""

from schemagen.logging.config import (
    LogFormat,
    LogLevel,
    SchemaGenLogger,
    configure_logging,
    get_logger,
)
from schemagen.logging.context import LogContext, with_log_context
from schemagen.logging.formatters import JSONFormatter, TextFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "SchemaGenLogger",
    "LogLevel",
    "LogFormat",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    # Context
    "LogContext",
    "with_log_context",
]
