"""
Media Entity

Photo and video gallery items.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import MediaType


class Media(SQLModel, table=True):
    __tablename__ = "media"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    type: MediaType
    url: str
    thumbnail_url: Optional[str] = None
    category: Optional[str] = Field(default=None, index=True)
    album: Optional[str] = Field(default=None, index=True)
    uploaded_at: datetime = Field(default_factory=utcnow)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    uploaded_by: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (Index("idx_media_type_uploaded", "type", "uploaded_at"),)
