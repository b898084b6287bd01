"""
Pydantic models for achievements (awards, certificates, publications).

``icon`` names the symbol the client shows next to the entry.  The
client knows the values in ``KNOWN_ICONS``; any other string is stored
unchanged and rendered with a fallback symbol.
"""

from pydantic import Field

from .base import CamelModel

KNOWN_ICONS = ("award", "certificate", "medal", "star", "trophy")


class AchievementBase(CamelModel):
    title: str = Field(..., examples=["AWS Certified Developer"])
    organization: str = Field(..., examples=["Amazon Web Services • April 2025"])
    description: str = Field(..., examples=["Associate level certification."])
    icon: str = Field(..., examples=list(KNOWN_ICONS))


class AchievementCreate(AchievementBase):
    """Schema for creating or replacing an achievement."""


class AchievementRead(AchievementBase):
    id: int
