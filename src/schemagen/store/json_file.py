"""
JSON file-based model library.

Stores the whole library as one JSON document, `{storage_key: [records]}`,
the same shape the browser keeps under `localStorage["schemaModels"]`.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from schemagen.core.errors import LibraryCorruptedError
from schemagen.logging import get_logger
from schemagen.store.base import ModelLibrary
from schemagen.store.models import SavedModel

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "schemaModels"


class JsonFileModelLibrary(ModelLibrary):
    """
    Model library persisted to a single JSON file.

    Every mutation rewrites the full record array. A missing file is an
    empty library. Suitable for development and single-user use; there is
    no locking between concurrent writers.
    """

    def __init__(self, path: str | Path, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        """
        Initialize the JSON file library.

        Args:
            path: Path to the JSON document
            storage_key: Key under which the record array is stored
        """
        self.path = Path(path)
        self.storage_key = storage_key
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            text = self.path.read_text(encoding="utf-8")
            if not text.strip():
                return {}
            document = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LibraryCorruptedError(str(self.path), str(e)) from e

        if not isinstance(document, dict):
            raise LibraryCorruptedError(str(self.path), "top-level value is not an object")
        return document

    def _load(self) -> list[SavedModel]:
        raw = self._read_document().get(self.storage_key, [])
        if not isinstance(raw, list):
            raise LibraryCorruptedError(str(self.path), f"'{self.storage_key}' is not a list")

        try:
            return [SavedModel.model_validate(item) for item in raw]
        except PydanticValidationError as e:
            raise LibraryCorruptedError(str(self.path), str(e)) from e

    def _write(self, records: list[SavedModel]) -> None:
        # Other keys in the document are preserved
        document = self._read_document()
        document[self.storage_key] = [r.to_storage_dict() for r in records]
        self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")

    async def save(self, record: SavedModel) -> None:
        records = self._load()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                records[i] = record
                break
        else:
            records.append(record)
        self._write(records)
        logger.debug(
            "Stored saved model",
            record_id=record.id,
            model_name=record.model_name,
            path=str(self.path),
        )

    async def get(self, record_id: str) -> SavedModel | None:
        for record in self._load():
            if record.id == record_id:
                return record
        return None

    async def list_models(self) -> list[SavedModel]:
        return self._load()

    async def delete(self, record_id: str) -> bool:
        records = self._load()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            return False
        self._write(remaining)
        logger.debug("Deleted saved model", record_id=record_id, path=str(self.path))
        return True

    async def clear(self) -> None:
        if self.path.exists():
            self._write([])
