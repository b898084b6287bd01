"""
Top‑level API router.

This router aggregates the per‑resource routers under a unified
prefix.  When a new resource type is introduced, include its router
here.
"""

from fastapi import APIRouter

from .endpoints import (
    achievements,
    contact,
    educations,
    experiences,
    messages,
    portfolio,
    profile,
    projects,
    skills,
)

router = APIRouter()

router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(educations.router, prefix="/educations", tags=["resume"])
router.include_router(skills.router, prefix="/skills", tags=["resume"])
router.include_router(experiences.router, prefix="/experiences", tags=["resume"])
router.include_router(achievements.router, prefix="/achievements", tags=["achievements"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
