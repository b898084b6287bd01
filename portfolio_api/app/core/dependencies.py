"""
Dependency injection utilities.

The store is created once by ``create_app`` and kept on
``app.state.store``; endpoints reach it, and the services wrapping it,
only through the providers below.
"""

import re

from fastapi import Depends, HTTPException, Request, status

from portfolio_api.app.core.store import PortfolioStore
from portfolio_api.app.schemas.achievement import AchievementRead
from portfolio_api.app.schemas.contact import ContactRead
from portfolio_api.app.schemas.education import EducationRead
from portfolio_api.app.schemas.experience import ExperienceRead
from portfolio_api.app.schemas.profile import ProfileRead
from portfolio_api.app.schemas.project import ProjectRead
from portfolio_api.app.schemas.skill import SkillRead
from portfolio_api.app.services.collection_service import CollectionService
from portfolio_api.app.services.message_service import MessageService
from portfolio_api.app.services.singleton_service import SingletonService

_ID_PATTERN = re.compile(r"-?[0-9]+")


def get_store(request: Request) -> PortfolioStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def valid_id(item_id: str) -> int:
    """Parse the ``{item_id}`` path segment.

    Anything that is not a plain base‑10 integer is rejected with 400
    before the store is touched.
    """
    if not _ID_PATTERN.fullmatch(item_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID format")
    return int(item_id)


def get_profile_service(store: PortfolioStore = Depends(get_store)) -> SingletonService[ProfileRead]:
    return SingletonService(store.profile, ProfileRead)


def get_contact_service(store: PortfolioStore = Depends(get_store)) -> SingletonService[ContactRead]:
    return SingletonService(store.contact, ContactRead)


def get_project_service(store: PortfolioStore = Depends(get_store)) -> CollectionService[ProjectRead]:
    return CollectionService(store.projects, ProjectRead)


def get_education_service(store: PortfolioStore = Depends(get_store)) -> CollectionService[EducationRead]:
    return CollectionService(store.educations, EducationRead)


def get_skill_service(store: PortfolioStore = Depends(get_store)) -> CollectionService[SkillRead]:
    return CollectionService(store.skills, SkillRead)


def get_experience_service(store: PortfolioStore = Depends(get_store)) -> CollectionService[ExperienceRead]:
    return CollectionService(store.experiences, ExperienceRead)


def get_achievement_service(store: PortfolioStore = Depends(get_store)) -> CollectionService[AchievementRead]:
    return CollectionService(store.achievements, AchievementRead)


def get_message_service(store: PortfolioStore = Depends(get_store)) -> MessageService:
    return MessageService(store.messages)
