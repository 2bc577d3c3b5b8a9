"""
Abstract model library interface.
"""

from abc import ABC, abstractmethod

from schemagen.store.models import SavedModel


class ModelLibrary(ABC):
    """
    Abstract base class for saved model storage.

    Records are kept in insertion order. Implementations make no durability
    guarantees; a backend may be volatile or lossy.
    """

    @abstractmethod
    async def save(self, record: SavedModel) -> None:
        """
        Append a record to the library.
        """
        ...

    @abstractmethod
    async def get(self, record_id: str) -> SavedModel | None:
        """
        Retrieve a record by ID.
        """
        ...

    @abstractmethod
    async def list_models(self) -> list[SavedModel]:
        """
        List all records in insertion order.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """
        Delete a record.

        Returns True if deleted, False if not found.
        """
        ...

    @abstractmethod
    async def clear(self) -> None:
        """
        Remove every record.
        """
        ...

    async def count(self) -> int:
        """Number of stored records."""
        return len(await self.list_models())
