"""
TypeScript interface generator.
"""

from collections.abc import Sequence

from schemagen.codegen.generator import CodeGenerator
from schemagen.core.types import ArtifactTarget, FieldDescriptor, FieldKind


class TypeScriptInterfaceGenerator(CodeGenerator):
    """Generates `export interface <Model> { ... }` with one member per line."""

    target = ArtifactTarget.TYPESCRIPT
    file_suffix = "types.ts"

    # Mapping from property kinds to TypeScript types
    TYPE_ANNOTATIONS: dict[FieldKind, str] = {
        FieldKind.STRING: "string",
        FieldKind.NUMBER: "number",
        FieldKind.BOOLEAN: "boolean",
        FieldKind.DATE: "Date",
        FieldKind.OBJECT_ID: "string",
        FieldKind.ARRAY: "any[]",
        FieldKind.OBJECT: "Record<string, any>",
    }

    def render_property(self, prop: FieldDescriptor, kind: FieldKind) -> str:
        marker = "" if prop.required else "?"
        return f"  {prop.name}{marker}: {self.TYPE_ANNOTATIONS[kind]}"

    def render_module(self, entries: str) -> str:
        return f"export interface {self.capitalized_name} {{\n{entries}\n}}"


def generate_type_declaration(model_name: str, properties: Sequence[FieldDescriptor]) -> str:
    """Render the TypeScript interface for a model."""
    return TypeScriptInterfaceGenerator(model_name, properties).render()
