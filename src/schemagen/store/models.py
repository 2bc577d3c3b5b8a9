"""
Saved model records.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from schemagen.core.types import FieldDescriptor, GeneratedCode


class SavedModel(BaseModel):
    """
    A model definition stored in the library together with its generated code.

    Serialized with camelCase aliases so records read and written by the
    browser library (`modelName`, `generatedCode`, `createdAt`) round-trip.
    """

    id: str
    model_name: str = Field(alias="modelName")
    properties: list[FieldDescriptor] = Field(default_factory=list)
    generated_code: GeneratedCode = Field(alias="generatedCode")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, protected_namespaces=())

    def property_summary(self) -> str:
        """Human-readable property count, e.g. "1 property" or "3 properties"."""
        count = len(self.properties)
        return f"{count} {'property' if count == 1 else 'properties'}"

    def formatted_created_at(self) -> str:
        """Creation time formatted like "Jan 5, 2025, 09:30 AM"."""
        created = self.created_at
        return f"{created:%b} {created.day}, {created:%Y, %I:%M %p}"

    def to_storage_dict(self) -> dict:
        """Convert to the JSON shape used by library backends."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
