"""
AuditLog Entity

Immutable record of who did what to which resource.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import AuditAction


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - immutable trail of mutations and auth events.

    Business Rules:
    - Immutable (never updated or deleted by the system)
    - One entry per mutating operation initiated by an authenticated user
    - changes holds the full request payload, not a diff
    - ip_address / user_agent captured from the originating request
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(index=True)
    action: AuditAction
    resource: str = Field(max_length=100)  # e.g. "News", "User"
    resource_id: Optional[UUID] = Field(default=None)
    changes: Optional[Any] = Field(default=None, sa_column=Column(JSON))

    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    timestamp: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        Index("idx_audit_user_timestamp", "user_id", "timestamp"),
        Index("idx_audit_resource", "resource", "resource_id"),
        Index("idx_audit_timestamp", "timestamp"),
    )
