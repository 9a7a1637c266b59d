"""
FAQ Entity
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel

from src.domain.base import utcnow


class FAQ(SQLModel, table=True):
    __tablename__ = "faqs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    question: str = Field(max_length=300)
    answer: str = Field(max_length=2000)
    category: str
    order: int = Field(default=0)
    is_published: bool = Field(default=True)

    created_by: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        Index("idx_faq_published_category_order", "is_published", "category", "order"),
    )
