"""
Pydantic models for contact form messages.

Messages are append‑only.  ``created_at`` may be supplied by the
client as an ISO‑8601 timestamp, in which case it is kept verbatim;
otherwise the server stamps the time of receipt.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from .base import CamelModel


class MessageBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["John Doe"])
    email: EmailStr = Field(..., examples=["john@example.com"])
    subject: str = Field(..., min_length=1, examples=["Internship opportunity"])
    message: str = Field(..., min_length=1, examples=["Hi Jane, ..."])


class MessageCreate(MessageBase):
    """Schema for submitting the contact form."""

    created_at: Optional[str] = Field(None, examples=["2025-01-31T12:00:00.000Z"])

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        try:
            datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError("createdAt must be an ISO-8601 timestamp")
        return v


class MessageRead(MessageBase):
    id: int
    created_at: str
