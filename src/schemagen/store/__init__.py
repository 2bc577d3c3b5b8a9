"""
SchemaGen Store Module.

Provides the model library where named model definitions and their
generated code are saved.
"""

from schemagen.store.base import ModelLibrary
from schemagen.store.json_file import DEFAULT_STORAGE_KEY, JsonFileModelLibrary
from schemagen.store.memory import InMemoryModelLibrary
from schemagen.store.models import SavedModel

__all__ = [
    # Models
    "SavedModel",
    # Base
    "ModelLibrary",
    # Implementations
    "InMemoryModelLibrary",
    "JsonFileModelLibrary",
    "DEFAULT_STORAGE_KEY",
]
