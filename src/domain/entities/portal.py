"""
Portal Entity

Links to external and internal service portals.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel

from src.domain.base import utcnow


class Portal(SQLModel, table=True):
    __tablename__ = "portals"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    description: str = Field(max_length=500)
    url: str
    icon: Optional[str] = None
    category: str = Field(index=True)
    is_external: bool = Field(default=True)
    requires_auth: bool = Field(default=False)
    order: int = Field(default=0)
    is_active: bool = Field(default=True)

    created_by: UUID = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (Index("idx_portal_active_order", "is_active", "order"),)
