"""
Portfolio endpoint.

Returns every section of the page in a single response so a client can
render the whole portfolio with one request.  Messages are not part
of the page and are not included.
"""

from fastapi import APIRouter, Depends

from portfolio_api.app.core.dependencies import (
    get_achievement_service,
    get_contact_service,
    get_education_service,
    get_experience_service,
    get_profile_service,
    get_project_service,
    get_skill_service,
)
from portfolio_api.app.schemas.portfolio import PortfolioRead
from portfolio_api.app.services.collection_service import CollectionService
from portfolio_api.app.services.singleton_service import SingletonService

router = APIRouter()


@router.get("", response_model=PortfolioRead)
async def get_portfolio(
    profile: SingletonService = Depends(get_profile_service),
    projects: CollectionService = Depends(get_project_service),
    educations: CollectionService = Depends(get_education_service),
    skills: CollectionService = Depends(get_skill_service),
    experiences: CollectionService = Depends(get_experience_service),
    achievements: CollectionService = Depends(get_achievement_service),
    contact: SingletonService = Depends(get_contact_service),
) -> PortfolioRead:
    return PortfolioRead(
        profile=await profile.get(),
        projects=await projects.list_items(),
        educations=await educations.list_items(),
        skills=await skills.list_items(),
        experiences=await experiences.list_items(),
        achievements=await achievements.list_items(),
        contact=await contact.get(),
    )
