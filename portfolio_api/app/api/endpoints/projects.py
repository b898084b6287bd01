"""
Project endpoints.

These routes expose a CRUD API for the projects shown in the
portfolio.  There is no server side access control: the client's edit
mode only toggles which controls are displayed, so any caller that can
reach the API may change projects.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from portfolio_api.app.core.dependencies import get_project_service, valid_id
from portfolio_api.app.schemas.project import ProjectCreate, ProjectRead
from portfolio_api.app.services.collection_service import CollectionService

router = APIRouter()


@router.get("", response_model=List[ProjectRead])
async def list_projects(
    service: CollectionService[ProjectRead] = Depends(get_project_service),
) -> List[ProjectRead]:
    """Return all projects."""
    return await service.list_items()


@router.get("/{item_id}", response_model=ProjectRead)
async def get_project(
    project_id: int = Depends(valid_id),
    service: CollectionService[ProjectRead] = Depends(get_project_service),
) -> ProjectRead:
    """Retrieve a single project by ID.

    Returns HTTP 404 if the project does not exist.
    """
    project = await service.get_item(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    service: CollectionService[ProjectRead] = Depends(get_project_service),
) -> ProjectRead:
    """Create a new project."""
    return await service.create_item(project_in)


@router.put("/{item_id}", response_model=ProjectRead)
async def update_project(
    project_in: ProjectCreate,
    project_id: int = Depends(valid_id),
    service: CollectionService[ProjectRead] = Depends(get_project_service),
) -> ProjectRead:
    """Replace every field of an existing project."""
    project = await service.update_item(project_id, project_in)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int = Depends(valid_id),
    service: CollectionService[ProjectRead] = Depends(get_project_service),
) -> None:
    """Delete a project."""
    deleted = await service.delete_item(project_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return None
