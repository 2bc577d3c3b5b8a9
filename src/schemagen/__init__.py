"""
SchemaGen - render Mongoose, Zod and TypeScript declarations from one model definition.

Describe a model as a name plus an ordered list of typed properties and
SchemaGen renders a Mongoose schema module, a Zod validation schema and a
TypeScript interface for it. A model library keeps named definitions and
their generated code for later reuse.
"""

__version__ = "0.1.0"

from schemagen.codegen import (
    generate_all,
    generate_storage_schema,
    generate_type_declaration,
    generate_validation_schema,
)
from schemagen.core.errors import (
    EditorError,
    LibraryCorruptedError,
    ModelNotFoundError,
    NothingToSaveError,
    PropertyNotFoundError,
    SchemaGenError,
    ValidationError,
)
from schemagen.core.types import FieldDescriptor, FieldKind, GeneratedCode, ModelDefinition
from schemagen.editor import SchemaEditor

__all__ = [
    # Version
    "__version__",
    # Types
    "FieldKind",
    "FieldDescriptor",
    "ModelDefinition",
    "GeneratedCode",
    # Generation
    "generate_storage_schema",
    "generate_validation_schema",
    "generate_type_declaration",
    "generate_all",
    # Editor
    "SchemaEditor",
    # Errors
    "SchemaGenError",
    "ValidationError",
    "NothingToSaveError",
    "EditorError",
    "PropertyNotFoundError",
    "ModelNotFoundError",
    "LibraryCorruptedError",
]
