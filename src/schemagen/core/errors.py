"""
Error taxonomy for SchemaGen.

The generators themselves never raise. These errors belong to the layers
around them (editor session and model library) and include:
- A unique error code for programmatic handling
- A human-readable message
- Optional hints describing how to recover
"""

from typing import Any


class SchemaGenError(Exception):
    """
    Base class for all SchemaGen errors.

    Attributes:
        code: Unique error code for programmatic handling
        message: Human-readable error message
        hints: Suggestions for how to fix the error
        details: Additional error context
    """

    code: str = "SCHEMAGEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        hints: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.hints = hints or []
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "hints": self.hints,
            "details": self.details,
        }


class ValidationError(SchemaGenError):
    """Generation was requested without a model name or any named property."""

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Model name and at least one property are required.",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


class NothingToSaveError(SchemaGenError):
    """A save was requested before any code was generated."""

    code = "NOTHING_TO_SAVE"

    def __init__(self, message: str = "Please generate a schema first.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class EditorError(SchemaGenError):
    """An edit that the editor session does not allow."""

    code = "EDITOR_ERROR"


class PropertyNotFoundError(SchemaGenError):
    """A property row index is out of range."""

    code = "PROPERTY_NOT_FOUND"

    def __init__(self, index: int, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"No property at index {index}",
            hints=[f"Valid indexes are 0 to {count - 1}"] if count else [],
            details={"index": index, "count": count},
            **kwargs,
        )


class ModelNotFoundError(SchemaGenError):
    """A saved model id is not in the library."""

    code = "MODEL_NOT_FOUND"

    def __init__(self, model_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"Saved model '{model_id}' not found",
            details={"model_id": model_id},
            **kwargs,
        )


class LibraryCorruptedError(SchemaGenError):
    """The library backing file could not be decoded."""

    code = "LIBRARY_CORRUPTED"

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Model library at '{path}' is unreadable: {reason}",
            hints=["Restore the file from a backup or delete it to start an empty library"],
            details={"path": path, "reason": reason},
            **kwargs,
        )
