"""
Service for multi‑valued resource types.

Projects, educations, skills, experiences and achievements share the
same five operations, so a single ``CollectionService`` is
instantiated once per type with that type's collection and read
schema.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from portfolio_api.app.core.store import RecordCollection

ReadT = TypeVar("ReadT", bound=BaseModel)

logger = logging.getLogger(__name__)


class CollectionService(Generic[ReadT]):
    """CRUD operations over one ``RecordCollection``."""

    def __init__(self, collection: RecordCollection, read_model: Type[ReadT]) -> None:
        self.collection = collection
        self.read_model = read_model

    async def list_items(self) -> List[ReadT]:
        """Return all records in insertion order."""
        return [self.read_model(**record) for record in self.collection.list()]

    async def get_item(self, item_id: int) -> Optional[ReadT]:
        record = self.collection.get(item_id)
        if record is None:
            return None
        return self.read_model(**record)

    async def create_item(self, data: BaseModel) -> ReadT:
        """Store a new record and return it with its assigned id."""
        record = self.collection.create(data.model_dump())
        logger.info("Created %s %s", self.collection.name, record["id"])
        return self.read_model(**record)

    async def update_item(self, item_id: int, data: BaseModel) -> Optional[ReadT]:
        """Replace all fields of a record.

        Returns ``None`` if the record does not exist.
        """
        record = self.collection.update(item_id, data.model_dump())
        if record is None:
            return None
        logger.info("Updated %s %s", self.collection.name, item_id)
        return self.read_model(**record)

    async def delete_item(self, item_id: int) -> bool:
        """Delete a record.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = self.collection.delete(item_id)
        if deleted:
            logger.info("Deleted %s %s", self.collection.name, item_id)
        return deleted
