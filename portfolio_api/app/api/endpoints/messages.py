"""
Contact form message endpoints.

Visitors submit messages through the contact form; the owner lists
them.  Messages cannot be read individually, changed or deleted.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from portfolio_api.app.core.dependencies import get_message_service
from portfolio_api.app.schemas.message import MessageCreate, MessageRead
from portfolio_api.app.services.message_service import MessageService

router = APIRouter()


@router.post("", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
async def create_message(
    message_in: MessageCreate,
    service: MessageService = Depends(get_message_service),
) -> MessageRead:
    """Store a contact form submission.

    ``createdAt`` is stamped by the server unless the client sent one.
    """
    return await service.create_message(message_in)


@router.get("", response_model=List[MessageRead])
async def list_messages(service: MessageService = Depends(get_message_service)) -> List[MessageRead]:
    """List all received messages."""
    return await service.list_messages()
