"""
BoardMember Entity
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.domain.base import utcnow


class BoardMember(SQLModel, table=True):
    """BoardMember entity - inactive members are only listed to staff."""

    __tablename__ = "board_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    position: str
    image: str  # URL to image
    bio: Optional[str] = None
    order: int = Field(default=0, index=True)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
