"""Contact details endpoints (singleton, replace only)."""

from typing import Optional

from fastapi import APIRouter, Depends

from portfolio_api.app.core.dependencies import get_contact_service
from portfolio_api.app.schemas.contact import ContactCreate, ContactRead
from portfolio_api.app.services.singleton_service import SingletonService

router = APIRouter()


@router.get("", response_model=Optional[ContactRead])
async def get_contact(
    service: SingletonService[ContactRead] = Depends(get_contact_service),
) -> Optional[ContactRead]:
    return await service.get()


@router.put("", response_model=ContactRead)
async def update_contact(
    contact_in: ContactCreate,
    service: SingletonService[ContactRead] = Depends(get_contact_service),
) -> ContactRead:
    return await service.replace(contact_in)
