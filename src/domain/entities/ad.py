"""
Ad Entity

Tiles shown in the home page ad grid.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import AdStatus, AdType


class Ad(SQLModel, table=True):
    """
    Ad entity - a grid tile.

    Business Rules:
    - col_span in 1..4, row_span in 1..2
    - only published ads are visible to anonymous visitors
    """

    __tablename__ = "ads"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: Optional[str] = Field(default=None, max_length=200)
    type: AdType = Field(index=True)
    content: str
    link: Optional[str] = None
    col_span: int = Field(default=1)
    row_span: int = Field(default=1)
    status: AdStatus = Field(default=AdStatus.draft)
    order: int = Field(default=0)

    author_id: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (Index("idx_ad_status_order", "status", "order"),)
