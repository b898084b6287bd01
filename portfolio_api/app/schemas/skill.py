"""
Pydantic models for skill groups.

A skill group is a category label with an ordered list of items.
Items are stored as submitted, including duplicates and empty strings.
"""

from typing import List

from pydantic import Field

from .base import CamelModel


class SkillBase(CamelModel):
    category: str = Field(..., examples=["Programming Languages"])
    items: List[str] = Field(..., examples=[["Python", "JavaScript", "SQL"]])


class SkillCreate(SkillBase):
    """Schema for creating or replacing a skill group."""


class SkillRead(SkillBase):
    id: int
