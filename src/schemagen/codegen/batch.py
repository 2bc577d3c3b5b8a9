"""
Batch generation of every artifact for one model.
"""

from collections.abc import Sequence

from schemagen.codegen.generator import (
    FALLBACK_KIND,
    CodeGenerator,
    GenerationResult,
    is_known_kind,
)
from schemagen.codegen.mongoose import MongooseSchemaGenerator
from schemagen.codegen.typescript import TypeScriptInterfaceGenerator
from schemagen.codegen.zod import ZodSchemaGenerator
from schemagen.core.types import FieldDescriptor, ModelDefinition
from schemagen.logging import get_logger

logger = get_logger(__name__)

GENERATORS: tuple[type[CodeGenerator], ...] = (
    MongooseSchemaGenerator,
    ZodSchemaGenerator,
    TypeScriptInterfaceGenerator,
)


def collect_warnings(properties: Sequence[FieldDescriptor]) -> list[str]:
    """List properties whose input is not reflected as given in the output."""
    warnings = []
    for prop in properties:
        if not is_known_kind(prop.kind):
            warnings.append(
                f"Property '{prop.name}' has unknown type '{prop.kind}', "
                f"rendered as {FALLBACK_KIND.value}"
            )
        if prop.default is not None:
            warnings.append(
                f"Property '{prop.name}' declares a default value, which is not rendered"
            )
    return warnings


def generate_all(model_name: str, properties: Sequence[FieldDescriptor]) -> GenerationResult:
    """
    Render the Mongoose, Zod and TypeScript artifacts for a model.

    Args:
        model_name: Raw model name
        properties: Ordered property descriptors

    Returns:
        GenerationResult with one file per target, in Mongoose/Zod/TypeScript order
    """
    result = GenerationResult(model_name=model_name)
    for generator_cls in GENERATORS:
        result.files.append(generator_cls(model_name, properties).generate())

    result.warnings.extend(collect_warnings(properties))
    for warning in result.warnings:
        logger.debug(warning, model_name=model_name)

    return result


def generate_definition(model: ModelDefinition) -> GenerationResult:
    """Render every artifact for a ModelDefinition."""
    return generate_all(model.model_name, model.properties)
