"""
Achievement endpoints.

Achievements cover awards, certifications and publications.  Each has
an ``icon`` string the client maps to a symbol.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.core.dependencies import get_achievement_service, valid_id
from portfolio_api.app.schemas.achievement import AchievementCreate, AchievementRead
from portfolio_api.app.services.collection_service import CollectionService

router = APIRouter()


@router.get("", response_model=List[AchievementRead])
async def list_achievements(
    service: CollectionService[AchievementRead] = Depends(get_achievement_service),
) -> List[AchievementRead]:
    """Return all achievements."""
    return await service.list_items()


@router.get("/{item_id}", response_model=AchievementRead)
async def get_achievement(
    achievement_id: int = Depends(valid_id),
    service: CollectionService[AchievementRead] = Depends(get_achievement_service),
) -> AchievementRead:
    """Retrieve a single achievement by ID."""
    achievement = await service.get_item(achievement_id)
    if achievement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return achievement


@router.post("", response_model=AchievementRead, status_code=status.HTTP_201_CREATED)
async def create_achievement(
    achievement_in: AchievementCreate,
    service: CollectionService[AchievementRead] = Depends(get_achievement_service),
) -> AchievementRead:
    """Create a new achievement."""
    return await service.create_item(achievement_in)


@router.put("/{item_id}", response_model=AchievementRead)
async def update_achievement(
    achievement_in: AchievementCreate,
    achievement_id: int = Depends(valid_id),
    service: CollectionService[AchievementRead] = Depends(get_achievement_service),
) -> AchievementRead:
    """Replace every field of an existing achievement."""
    achievement = await service.update_item(achievement_id, achievement_in)
    if achievement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return achievement


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_achievement(
    achievement_id: int = Depends(valid_id),
    service: CollectionService[AchievementRead] = Depends(get_achievement_service),
) -> None:
    """Delete an achievement."""
    deleted = await service.delete_item(achievement_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return None
