"""
Mongoose schema generator.

Renders a Mongoose schema module for a model.
"""

from collections.abc import Sequence

from schemagen.codegen.generator import CodeGenerator, format_number
from schemagen.core.types import ArtifactTarget, FieldDescriptor, FieldKind


class MongooseSchemaGenerator(CodeGenerator):
    """
    Generates a Mongoose schema module.

    The module declares `<modelName>Schema` and exports a model that reuses
    an already registered model of the same name before registering a new
    one. Timestamps are always enabled.

    Example output:
        import mongoose from 'mongoose'

        const userSchema = new mongoose.Schema({
          email: {
            type: String,
            required: true,
          },
        }, { timestamps: true })

        const User = mongoose.models.User || mongoose.model('User', userSchema)

        export default User
    """

    target = ArtifactTarget.MONGOOSE
    file_suffix = "model.ts"

    # Mapping from property kinds to Mongoose SchemaTypes
    TYPE_TOKENS: dict[FieldKind, str] = {
        FieldKind.STRING: "String",
        FieldKind.NUMBER: "Number",
        FieldKind.BOOLEAN: "Boolean",
        FieldKind.DATE: "Date",
        FieldKind.OBJECT_ID: "mongoose.Schema.Types.ObjectId",
        FieldKind.ARRAY: "[]",
        FieldKind.OBJECT: "Object",
    }

    # Bound option names per kind: (min option, max option)
    BOUND_OPTIONS: dict[FieldKind, tuple[str, str]] = {
        FieldKind.STRING: ("minlength", "maxlength"),
        FieldKind.NUMBER: ("min", "max"),
    }

    def render_property(self, prop: FieldDescriptor, kind: FieldKind) -> str:
        lines = [
            f"  {prop.name}: {{",
            f"    type: {self.TYPE_TOKENS[kind]},",
        ]

        if prop.required:
            lines.append("    required: true,")

        if prop.unique:
            lines.append("    unique: true,")

        if kind in self.BOUND_OPTIONS:
            min_option, max_option = self.BOUND_OPTIONS[kind]
            if prop.min is not None:
                lines.append(f"    {min_option}: {format_number(prop.min)},")
            if prop.max is not None:
                lines.append(f"    {max_option}: {format_number(prop.max)},")

        lines.append("  },")
        return "\n".join(lines)

    def render_module(self, entries: str) -> str:
        name = self.model_name
        cap = self.capitalized_name
        return "\n".join([
            "import mongoose from 'mongoose'",
            "",
            f"const {name}Schema = new mongoose.Schema({{",
            entries,
            "}, { timestamps: true })",
            "",
            f"const {cap} = mongoose.models.{cap} || mongoose.model('{cap}', {name}Schema)",
            "",
            f"export default {cap}",
        ])


def generate_storage_schema(model_name: str, properties: Sequence[FieldDescriptor]) -> str:
    """Render the Mongoose schema module for a model."""
    return MongooseSchemaGenerator(model_name, properties).render()
