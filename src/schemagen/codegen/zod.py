"""
Zod schema generator.
"""

from collections.abc import Sequence

from schemagen.codegen.generator import CodeGenerator, format_number
from schemagen.core.types import BOUNDED_KINDS, ArtifactTarget, FieldDescriptor, FieldKind


class ZodSchemaGenerator(CodeGenerator):
    """
    Generates a Zod object schema exported as `<Model>Schema`.

    Each property is a validator chain: base validator, then `.min()` and
    `.max()` for bounded kinds, then `.optional()` for non-required
    properties. Every entry ends with a comma.
    """

    target = ArtifactTarget.ZOD
    file_suffix = "schema.ts"

    # Mapping from property kinds to Zod base validators
    VALIDATORS: dict[FieldKind, str] = {
        FieldKind.STRING: "string()",
        FieldKind.NUMBER: "number()",
        FieldKind.BOOLEAN: "boolean()",
        FieldKind.DATE: "date()",
        FieldKind.OBJECT_ID: "string()",
        FieldKind.ARRAY: "array(z.any())",
        FieldKind.OBJECT: "record(z.any())",
    }

    def render_property(self, prop: FieldDescriptor, kind: FieldKind) -> str:
        chain = f"z.{self.VALIDATORS[kind]}"

        if kind in BOUNDED_KINDS:
            if prop.min is not None:
                chain += f".min({format_number(prop.min)})"
            if prop.max is not None:
                chain += f".max({format_number(prop.max)})"

        if not prop.required:
            chain += ".optional()"

        return f"  {prop.name}: {chain},"

    def render_module(self, entries: str) -> str:
        return "\n".join([
            "import { z } from 'zod'",
            "",
            f"export const {self.capitalized_name}Schema = z.object({{",
            entries,
            "})",
        ])


def generate_validation_schema(model_name: str, properties: Sequence[FieldDescriptor]) -> str:
    """Render the Zod schema for a model."""
    return ZodSchemaGenerator(model_name, properties).render()
