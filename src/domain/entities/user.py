"""
User Entity

Represents a CMS administrator account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - a person who administers site content.

    Business Rules:
    - Email must be unique and is stored lowercased
    - Password stored as bcrypt hash, never serialized
    - Inactive users cannot log in or use existing tokens
    - Never deleted except by explicit super-admin action (not on self)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    role: UserRole = Field(default=UserRole.content_manager)
    is_active: bool = Field(default=True)

    last_login: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (Index("idx_user_role", "role"),)
