"""Education endpoints for the resume section."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.core.dependencies import get_education_service, valid_id
from portfolio_api.app.schemas.education import EducationCreate, EducationRead
from portfolio_api.app.services.collection_service import CollectionService

router = APIRouter()


@router.get("", response_model=List[EducationRead])
async def list_educations(
    service: CollectionService[EducationRead] = Depends(get_education_service),
) -> List[EducationRead]:
    return await service.list_items()


@router.get("/{item_id}", response_model=EducationRead)
async def get_education(
    education_id: int = Depends(valid_id),
    service: CollectionService[EducationRead] = Depends(get_education_service),
) -> EducationRead:
    education = await service.get_item(education_id)
    if education is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education not found")
    return education


@router.post("", response_model=EducationRead, status_code=status.HTTP_201_CREATED)
async def create_education(
    education_in: EducationCreate,
    service: CollectionService[EducationRead] = Depends(get_education_service),
) -> EducationRead:
    return await service.create_item(education_in)


@router.put("/{item_id}", response_model=EducationRead)
async def update_education(
    education_in: EducationCreate,
    education_id: int = Depends(valid_id),
    service: CollectionService[EducationRead] = Depends(get_education_service),
) -> EducationRead:
    education = await service.update_item(education_id, education_in)
    if education is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education not found")
    return education


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_education(
    education_id: int = Depends(valid_id),
    service: CollectionService[EducationRead] = Depends(get_education_service),
) -> None:
    deleted = await service.delete_item(education_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Education not found")
    return None
