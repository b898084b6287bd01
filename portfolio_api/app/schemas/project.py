"""
Pydantic models for portfolio projects.

``technologies`` is an ordered list of labels; duplicates are kept as
submitted.
"""

from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class ProjectBase(CamelModel):
    title: str = Field(..., examples=["Personal Portfolio Website"])
    description: str = Field(..., examples=["A responsive portfolio website."])
    image_url: Optional[str] = Field(None, examples=["https://images.example.com/portfolio.jpg"])
    technologies: List[str] = Field(..., examples=[["HTML", "CSS", "JavaScript"]])
    project_url: Optional[str] = None
    github_url: Optional[str] = None


class ProjectCreate(ProjectBase):
    """Schema for creating or replacing a project."""


class ProjectRead(ProjectBase):
    """Schema for reading a project."""

    id: int
