"""
SchemaGen Code Generation Module.

Renders Mongoose schemas, Zod schemas and TypeScript interfaces from a
model name and its ordered properties.
"""

from schemagen.codegen.batch import generate_all, generate_definition
from schemagen.codegen.generator import (
    CodeGenerator,
    GeneratedFile,
    GenerationResult,
    capitalize_model_name,
    resolve_kind,
)
from schemagen.codegen.mongoose import MongooseSchemaGenerator, generate_storage_schema
from schemagen.codegen.typescript import TypeScriptInterfaceGenerator, generate_type_declaration
from schemagen.codegen.zod import ZodSchemaGenerator, generate_validation_schema

__all__ = [
    # Base
    "CodeGenerator",
    "GeneratedFile",
    "GenerationResult",
    "capitalize_model_name",
    "resolve_kind",
    # Generators
    "MongooseSchemaGenerator",
    "ZodSchemaGenerator",
    "TypeScriptInterfaceGenerator",
    # Functions
    "generate_storage_schema",
    "generate_validation_schema",
    "generate_type_declaration",
    "generate_all",
    "generate_definition",
]
