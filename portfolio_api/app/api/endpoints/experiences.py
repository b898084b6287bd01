"""Work experience endpoints for the resume section."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.core.dependencies import get_experience_service, valid_id
from portfolio_api.app.schemas.experience import ExperienceCreate, ExperienceRead
from portfolio_api.app.services.collection_service import CollectionService

router = APIRouter()


@router.get("", response_model=List[ExperienceRead])
async def list_experiences(
    service: CollectionService[ExperienceRead] = Depends(get_experience_service),
) -> List[ExperienceRead]:
    return await service.list_items()


@router.get("/{item_id}", response_model=ExperienceRead)
async def get_experience(
    experience_id: int = Depends(valid_id),
    service: CollectionService[ExperienceRead] = Depends(get_experience_service),
) -> ExperienceRead:
    experience = await service.get_item(experience_id)
    if experience is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.post("", response_model=ExperienceRead, status_code=status.HTTP_201_CREATED)
async def create_experience(
    experience_in: ExperienceCreate,
    service: CollectionService[ExperienceRead] = Depends(get_experience_service),
) -> ExperienceRead:
    return await service.create_item(experience_in)


@router.put("/{item_id}", response_model=ExperienceRead)
async def update_experience(
    experience_in: ExperienceCreate,
    experience_id: int = Depends(valid_id),
    service: CollectionService[ExperienceRead] = Depends(get_experience_service),
) -> ExperienceRead:
    experience = await service.update_item(experience_id, experience_in)
    if experience is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return experience


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_experience(
    experience_id: int = Depends(valid_id),
    service: CollectionService[ExperienceRead] = Depends(get_experience_service),
) -> None:
    deleted = await service.delete_item(experience_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Experience not found")
    return None
