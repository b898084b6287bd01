"""
Pydantic models for work experience.

``responsibilities`` is free text; clients render each line as a
bullet point.
"""

from pydantic import Field

from .base import CamelModel


class ExperienceBase(CamelModel):
    position: str = Field(..., examples=["Software Engineering Intern"])
    company: str = Field(..., examples=["Tech Innovations Inc."])
    date_range: str = Field(..., examples=["Summer 2023"])
    responsibilities: str = Field(..., examples=["• Built features\n• Reviewed code"])


class ExperienceCreate(ExperienceBase):
    """Schema for creating or replacing an experience entry."""


class ExperienceRead(ExperienceBase):
    id: int
