"""
Profile endpoints.

The profile is a singleton, so there is no id in the path and no
delete.  ``PUT`` replaces the whole profile.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from portfolio_api.app.core.dependencies import get_profile_service
from portfolio_api.app.schemas.profile import ProfileCreate, ProfileRead
from portfolio_api.app.services.singleton_service import SingletonService

router = APIRouter()


@router.get("", response_model=Optional[ProfileRead])
async def get_profile(
    service: SingletonService[ProfileRead] = Depends(get_profile_service),
) -> Optional[ProfileRead]:
    """Return the profile, or ``null`` if it has never been set."""
    return await service.get()


@router.put("", response_model=ProfileRead)
async def update_profile(
    profile_in: ProfileCreate,
    service: SingletonService[ProfileRead] = Depends(get_profile_service),
) -> ProfileRead:
    """Replace the profile.  All required fields must be present."""
    return await service.replace(profile_in)
