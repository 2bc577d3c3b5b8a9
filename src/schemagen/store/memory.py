"""
In-memory model library.
"""

from schemagen.logging import get_logger
from schemagen.store.base import ModelLibrary
from schemagen.store.models import SavedModel

logger = get_logger(__name__)


class InMemoryModelLibrary(ModelLibrary):
    """
    Volatile model library for testing and development.
    """

    def __init__(self) -> None:
        self._records: dict[str, SavedModel] = {}

    async def save(self, record: SavedModel) -> None:
        # Re-saving an id replaces the record but keeps its original position
        self._records[record.id] = record
        logger.debug("Stored saved model", record_id=record.id, model_name=record.model_name)

    async def get(self, record_id: str) -> SavedModel | None:
        return self._records.get(record_id)

    async def list_models(self) -> list[SavedModel]:
        return list(self._records.values())

    async def delete(self, record_id: str) -> bool:
        if record_id not in self._records:
            return False
        del self._records[record_id]
        logger.debug("Deleted saved model", record_id=record_id)
        return True

    async def clear(self) -> None:
        self._records.clear()
