"""
Shared type definitions for SchemaGen.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FieldKind(str, Enum):
    """Supported property kinds."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    DATE = "Date"
    OBJECT_ID = "ObjectId"
    ARRAY = "Array"
    OBJECT = "Object"


# Kinds whose min/max are rendered (length bounds for String, value bounds for Number)
BOUNDED_KINDS = frozenset({FieldKind.STRING, FieldKind.NUMBER})


class FieldDescriptor(BaseModel):
    """A single declared property of a model."""

    name: str
    kind: str = Field(default=FieldKind.STRING.value, alias="type")  # Raw string so unknown kinds survive
    required: bool = False
    unique: bool = False
    min: int | float | None = None
    max: int | float | None = None
    # Carried and persisted, never rendered by any generator
    default: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def is_blank(self) -> bool:
        """Check if the property has no usable name."""
        return self.name.strip() == ""


class ModelDefinition(BaseModel):
    """A model name plus its ordered properties."""

    model_name: str = Field(alias="modelName")
    properties: list[FieldDescriptor] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True, protected_namespaces=())


class ArtifactTarget(str, Enum):
    """The three rendered artifacts."""

    MONGOOSE = "mongoose"
    ZOD = "zod"
    TYPESCRIPT = "typescript"


class GeneratedCode(BaseModel):
    """The three generated sources for one model, keyed by target."""

    mongoose: str = ""
    zod: str = ""
    typescript: str = ""

    model_config = ConfigDict(frozen=True)

    def get(self, target: ArtifactTarget | str) -> str:
        """Get the source for a target."""
        return getattr(self, ArtifactTarget(target).value)

    def is_empty(self) -> bool:
        """Check if nothing has been generated yet."""
        return not self.mongoose
