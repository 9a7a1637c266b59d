"""
Publication Entity

Downloadable reports and magazines.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import PublicationCategory


class Publication(SQLModel, table=True):
    """
    Publication entity - a report file hosted in object storage.

    Business Rules:
    - publish_year between 1960 and next year
    - download_count grows on every download request
    """

    __tablename__ = "publications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=300)
    description: str = Field(max_length=1000)
    category: PublicationCategory
    file_url: str
    file_size: int
    file_type: str = Field(default="application/pdf")
    publish_year: int
    published_at: datetime = Field(default_factory=utcnow)
    download_count: int = Field(default=0)

    created_by: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        Index("idx_publication_category_year", "category", "publish_year"),
        Index("idx_publication_published_at", "published_at"),
    )
