"""
Pydantic models for the portfolio owner's profile.

The profile is a singleton: at most one exists and it is replaced in
full on every update.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class ProfileBase(CamelModel):
    name: str = Field(..., examples=["Jane Smith"])
    title: str = Field(..., examples=["Computer Science Student"])
    university: str = Field(..., examples=["State University, Class of 2026"])
    bio: str = Field(..., examples=["I'm a computer science student interested in web development."])
    photo_url: Optional[str] = Field(None, examples=["https://images.example.com/profile.png"])
    linkedin: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    email: Optional[str] = None


class ProfileCreate(ProfileBase):
    """Schema for replacing the profile."""


class ProfileRead(ProfileBase):
    """Schema for reading the profile."""

    id: int
