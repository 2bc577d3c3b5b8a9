"""
Logging context management for SchemaGen.

Provides context injection for structured logging, so the model being edited,
the artifact being rendered, and the library record being touched are
automatically included in log messages.
"""

from __future__ import annotations

import contextvars
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "schemagen_log_context",
    default=None,
)


@dataclass
class LogContext:
    """
    Structured logging context.

    Contains fields that should be included in all log messages within
    a specific scope (e.g., one generation or one library operation).
    """

    model_name: str | None = None
    target: str | None = None
    record_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary of non-None values."""
        result = {}
        if self.model_name is not None:
            result["model_name"] = self.model_name
        if self.target is not None:
            result["target"] = self.target
        if self.record_id is not None:
            result["record_id"] = self.record_id
        result.update(self.extra)
        return result


def get_log_context() -> dict[str, Any]:
    """Get the current log context."""
    ctx = _log_context.get()
    return ctx.copy() if ctx else {}


@contextmanager
def with_log_context(
    context: LogContext | dict[str, Any] | None = None,
    **kwargs: Any,
) -> Iterator[None]:
    """
    Context manager for setting log context within a scope.

    Example:
        with with_log_context(model_name="user"):
            logger.info("Generating schemas")  # Includes model_name

    Args:
        context: Optional LogContext or dict of context fields
        **kwargs: Additional context fields
    """
    previous = _log_context.get()

    if context is not None:
        new_context = (
            context.to_dict() if isinstance(context, LogContext) else context.copy()
        )
    else:
        new_context = previous.copy() if previous else {}

    new_context.update(kwargs)
    _log_context.set(new_context)

    try:
        yield
    finally:
        _log_context.set(previous)


class ContextFilter(logging.Filter):
    """
    Logging filter that injects context fields into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context fields to the log record."""
        context = get_log_context()
        for key, value in context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
