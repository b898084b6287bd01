"""
Service for singleton resource types (profile and contact).

A singleton is read as a whole and replaced as a whole.  Updating acts
as an upsert: it succeeds whether or not a record existed, and no
field of the previous record survives.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from portfolio_api.app.core.store import SingletonRecord

ReadT = TypeVar("ReadT", bound=BaseModel)

logger = logging.getLogger(__name__)


class SingletonService(Generic[ReadT]):
    def __init__(self, holder: SingletonRecord, read_model: Type[ReadT]) -> None:
        self.holder = holder
        self.read_model = read_model

    async def get(self) -> Optional[ReadT]:
        record = self.holder.get()
        if record is None:
            return None
        return self.read_model(**record)

    async def replace(self, data: BaseModel) -> ReadT:
        record = self.holder.update(data.model_dump())
        logger.info("Replaced %s", self.holder.name)
        return self.read_model(**record)
