"""
Service layer for contact form messages.

Messages are append‑only: they can be created and listed but never
read individually, updated or deleted through the API.
"""

import logging
from datetime import datetime, timezone
from typing import List

from portfolio_api.app.core.store import RecordCollection
from portfolio_api.app.schemas.message import MessageCreate, MessageRead

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time with millisecond precision, e.g. ``2025-01-31T12:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MessageService:
    """Service for storing visitor messages."""

    def __init__(self, collection: RecordCollection) -> None:
        self.collection = collection

    async def create_message(self, data: MessageCreate) -> MessageRead:
        """Store a message, stamping ``created_at`` when the client did not."""
        fields = data.model_dump()
        if fields.get("created_at") is None:
            fields["created_at"] = utc_timestamp()
        record = self.collection.create(fields)
        logger.info("Received message %s from %s", record["id"], record["email"])
        return MessageRead(**record)

    async def list_messages(self) -> List[MessageRead]:
        return [MessageRead(**record) for record in self.collection.list()]
