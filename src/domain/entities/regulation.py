"""
Regulation Entity

Acts, guidelines and gazetted regulations.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ContentStatus, RegulationCategory


class Regulation(SQLModel, table=True):
    """Regulation entity - published by default, drafts hidden from the public."""

    __tablename__ = "regulations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=300)
    description: str = Field(max_length=2000)
    category: RegulationCategory
    file_url: str
    file_size: Optional[int] = None
    file_type: str = Field(default="application/pdf")
    effective_date: Optional[datetime] = None
    status: ContentStatus = Field(default=ContentStatus.published, index=True)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_by: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        Index("idx_regulation_category_effective", "category", "effective_date"),
    )
