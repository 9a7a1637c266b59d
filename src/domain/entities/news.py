"""
News Entity

Articles published on the public site.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ContentStatus


class News(SQLModel, table=True):
    """
    News entity - a news article.

    Business Rules:
    - slug is unique, derived from the title when not supplied
    - published_at is set once, on the first transition to published
    - views only grows, incremented by anonymous reads of published articles
    """

    __tablename__ = "news"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    slug: str = Field(unique=True, index=True, max_length=255)
    content: str
    excerpt: str = Field(max_length=500)
    featured_image: Optional[str] = None
    category: str = Field(index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    author_id: UUID = Field(index=True)
    published_at: Optional[datetime] = None
    status: ContentStatus = Field(default=ContentStatus.draft)
    views: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (Index("idx_news_status_published", "status", "published_at"),)
