"""
Editor session.

Holds the model being edited, enforces the checks that must pass before the
generators are invoked or a model is saved, and moves models in and out of
a model library.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from schemagen.codegen import GenerationResult, generate_all
from schemagen.core.errors import (
    EditorError,
    ModelNotFoundError,
    NothingToSaveError,
    PropertyNotFoundError,
    ValidationError,
)
from schemagen.core.types import FieldDescriptor, GeneratedCode, ModelDefinition
from schemagen.logging import get_logger, with_log_context
from schemagen.store.base import ModelLibrary
from schemagen.store.models import SavedModel
from schemagen.utils.defaults import DEFAULT_PROD, DefaultsProfile

logger = get_logger(__name__)


class SchemaEditor:
    """
    Editable model definition plus the code last generated from it.

    The editor always holds at least one property row. Rows with a blank
    name are kept while editing but are never passed to the generators or
    saved.

    Example:
        editor = SchemaEditor()
        editor.model_name = "user"
        editor.update_property(0, name="email", required=True, unique=True)
        code = editor.generate()
        await editor.save_to_library(library)
    """

    def __init__(self, profile: DefaultsProfile = DEFAULT_PROD) -> None:
        self.profile = profile
        self.model_name = ""
        self.properties: list[FieldDescriptor] = [self._blank_property()]
        self.generated_code = GeneratedCode()
        self.last_result: GenerationResult | None = None

    def _blank_property(self) -> FieldDescriptor:
        return FieldDescriptor(name="", kind=self.profile.default_kind)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.properties):
            raise PropertyNotFoundError(index, len(self.properties))

    # === Property rows ===

    def add_property(self) -> FieldDescriptor:
        """Append a blank property row and return it."""
        prop = self._blank_property()
        self.properties.append(prop)
        return prop

    def remove_property(self, index: int) -> None:
        """Remove the property row at index; the last remaining row cannot be removed."""
        self._check_index(index)
        if len(self.properties) == 1:
            raise EditorError(
                "Cannot remove the only property",
                hints=["Clear the property's name instead"],
            )
        del self.properties[index]

    def update_property(self, index: int, **changes: Any) -> FieldDescriptor:
        """
        Replace the property row at index with the given fields changed.

        Args:
            index: Row index
            **changes: FieldDescriptor fields to change (name, kind, required,
                unique, min, max, default)

        Returns:
            The updated property

        Raises:
            PropertyNotFoundError: If index is out of range
            EditorError: If a field is unknown or a value does not validate
        """
        self._check_index(index)

        unknown = set(changes) - set(FieldDescriptor.model_fields)
        if unknown:
            raise EditorError(
                f"Unknown property fields: {', '.join(sorted(unknown))}",
                hints=[f"Valid fields: {', '.join(FieldDescriptor.model_fields)}"],
                details={"unknown_fields": sorted(unknown)},
            )

        try:
            updated = FieldDescriptor.model_validate(
                {**self.properties[index].model_dump(), **changes}
            )
        except PydanticValidationError as e:
            raise EditorError(
                f"Invalid value for property {index}",
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e
        self.properties[index] = updated
        return updated

    def valid_properties(self) -> list[FieldDescriptor]:
        """Property rows with a non-blank name, in order."""
        return [prop for prop in self.properties if not prop.is_blank()]

    def definition(self) -> ModelDefinition:
        """The model definition the generators would receive."""
        return ModelDefinition(model_name=self.model_name, properties=self.valid_properties())

    # === Generation ===

    def generate(self) -> GeneratedCode:
        """
        Generate Mongoose, Zod and TypeScript code for the current model.

        Raises:
            ValidationError: If the model name is blank or no property has a name
        """
        properties = self.valid_properties()

        if self.model_name.strip() == "" or not properties:
            logger.warning(
                "Generation rejected",
                model_name=self.model_name,
                property_count=len(properties),
            )
            raise ValidationError(
                details={"model_name": self.model_name, "property_count": len(properties)},
            )

        with with_log_context(model_name=self.model_name):
            result = generate_all(self.model_name, properties)
            self.last_result = result
            self.generated_code = result.to_generated_code()
            logger.info(
                "Generated schemas",
                property_count=len(properties),
                warning_count=len(result.warnings),
            )

        return self.generated_code

    # === Library ===

    async def save_to_library(self, library: ModelLibrary) -> SavedModel:
        """
        Save the current model and its generated code to a library.

        Raises:
            NothingToSaveError: If nothing has been generated or the model name is blank
        """
        if self.generated_code.is_empty() or self.model_name.strip() == "":
            logger.warning("Save rejected", model_name=self.model_name)
            raise NothingToSaveError()

        record = SavedModel(
            id=uuid4().hex,
            model_name=self.model_name,
            properties=self.valid_properties(),
            generated_code=self.generated_code,
            created_at=datetime.now(timezone.utc),
        )
        await library.save(record)

        logger.info(
            "Model saved to library",
            model_name=record.model_name,
            record_id=record.id,
        )
        return record

    def load_model(self, record: SavedModel) -> None:
        """Load a saved model into the editor, replacing the current state."""
        self.model_name = record.model_name
        self.properties = list(record.properties) or [self._blank_property()]
        self.generated_code = record.generated_code
        self.last_result = None

        logger.info(
            "Model loaded into editor",
            model_name=record.model_name,
            record_id=record.id,
        )

    async def delete_model(self, library: ModelLibrary, record_id: str) -> None:
        """
        Remove a saved model from a library.

        Raises:
            ModelNotFoundError: If no record has the given id
        """
        if not await library.delete(record_id):
            raise ModelNotFoundError(record_id)
        logger.info("Model removed from library", record_id=record_id)
