"""
Skill endpoints for the resume section.

A skill entry groups an ordered list of items under a category such as
"Programming Languages".
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.core.dependencies import get_skill_service, valid_id
from portfolio_api.app.schemas.skill import SkillCreate, SkillRead
from portfolio_api.app.services.collection_service import CollectionService

router = APIRouter()


@router.get("", response_model=List[SkillRead])
async def list_skills(
    service: CollectionService[SkillRead] = Depends(get_skill_service),
) -> List[SkillRead]:
    return await service.list_items()


@router.get("/{item_id}", response_model=SkillRead)
async def get_skill(
    skill_id: int = Depends(valid_id),
    service: CollectionService[SkillRead] = Depends(get_skill_service),
) -> SkillRead:
    skill = await service.get_item(skill_id)
    if skill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return skill


@router.post("", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
async def create_skill(
    skill_in: SkillCreate,
    service: CollectionService[SkillRead] = Depends(get_skill_service),
) -> SkillRead:
    return await service.create_item(skill_in)


@router.put("/{item_id}", response_model=SkillRead)
async def update_skill(
    skill_in: SkillCreate,
    skill_id: int = Depends(valid_id),
    service: CollectionService[SkillRead] = Depends(get_skill_service),
) -> SkillRead:
    skill = await service.update_item(skill_id, skill_in)
    if skill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return skill


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_skill(
    skill_id: int = Depends(valid_id),
    service: CollectionService[SkillRead] = Depends(get_skill_service),
) -> None:
    deleted = await service.delete_item(skill_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Skill not found")
    return None
