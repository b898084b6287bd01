"""
Pydantic models for the contact section.

Like the profile, contact details are a singleton.  ``form_email`` is
the address contact form submissions are meant for and
``success_message`` is shown to visitors after they send a message.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class ContactBase(CamelModel):
    email: str = Field(..., examples=["jane.smith@example.com"])
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    form_email: Optional[str] = None
    success_message: Optional[str] = Field(
        None, examples=["Thank you for your message! I'll get back to you soon."]
    )


class ContactCreate(ContactBase):
    """Schema for replacing the contact details."""


class ContactRead(ContactBase):
    id: int
