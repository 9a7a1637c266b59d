"""
ContactSubmission Entity

Messages sent through the public contact form.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.domain.base import utcnow

from .enums import ContactStatus


class ContactSubmission(SQLModel, table=True):
    __tablename__ = "contact_submissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    subject: str = Field(max_length=200)
    message: str = Field(max_length=5000)
    status: ContactStatus = Field(default=ContactStatus.new, index=True)
    ip_address: Optional[str] = Field(default=None, max_length=64)

    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
