"""
StaticPage Entity

Editable informational pages addressed by slug.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Index, SQLModel

from src.domain.base import utcnow


class StaticPage(SQLModel, table=True):
    """
    StaticPage entity - a page made of free content plus ordered sections.

    Business Rules:
    - slug is unique, derived from the title when not supplied
    - last_edited_by always points at the latest editor
    - sections is a list of {type, heading, content, order}
    """

    __tablename__ = "static_pages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(unique=True, index=True, max_length=255)
    content: str
    sections: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    meta_title: Optional[str] = Field(default=None, max_length=60)
    meta_description: Optional[str] = Field(default=None, max_length=160)
    template: str = Field(default="default")
    order: int = Field(default=0)
    is_published: bool = Field(default=True)

    last_edited_by: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (Index("idx_page_published_order", "is_published", "order"),)
