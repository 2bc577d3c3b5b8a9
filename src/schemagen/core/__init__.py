"""
SchemaGen core module.

Contains the model definition types and the error taxonomy.
"""

from schemagen.core.errors import (
    EditorError,
    LibraryCorruptedError,
    ModelNotFoundError,
    NothingToSaveError,
    PropertyNotFoundError,
    SchemaGenError,
    ValidationError,
)
from schemagen.core.types import (
    BOUNDED_KINDS,
    ArtifactTarget,
    FieldDescriptor,
    FieldKind,
    GeneratedCode,
    ModelDefinition,
)

__all__ = [
    # Types
    "FieldKind",
    "FieldDescriptor",
    "ModelDefinition",
    "BOUNDED_KINDS",
    "ArtifactTarget",
    "GeneratedCode",
    # Errors
    "SchemaGenError",
    "ValidationError",
    "NothingToSaveError",
    "EditorError",
    "PropertyNotFoundError",
    "ModelNotFoundError",
    "LibraryCorruptedError",
]
