"""Pydantic models for education entries of the resume."""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class EducationBase(CamelModel):
    degree: str = Field(..., examples=["Bachelor of Technology in Computer Science"])
    institution: str = Field(..., examples=["State University"])
    date_range: str = Field(..., examples=["2022 - Present"])
    gpa: Optional[str] = Field(None, examples=["8.0/10"])
    description: Optional[str] = None


class EducationCreate(EducationBase):
    """Schema for creating or replacing an education entry."""


class EducationRead(EducationBase):
    id: int
