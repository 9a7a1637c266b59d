from typing import List
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.domain.entities import AuditLog


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Create a new audit entry (immutable)"""
        self.session.add(audit_log)
        await self.session.flush()
        await self.session.refresh(audit_log)
        return audit_log

    async def list_by_actor(self, actor_id: UUID, limit: int = 50) -> List[AuditLog]:
        stmt = (
            select(AuditLog)
            .where(AuditLog.user_id == actor_id)
            .order_by(col(AuditLog.timestamp).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_resource(
        self, resource_type: str, resource_id: UUID, limit: int = 50
    ) -> List[AuditLog]:
        stmt = (
            select(AuditLog)
            .where(AuditLog.resource == resource_type, AuditLog.resource_id == resource_id)
            .order_by(col(AuditLog.timestamp).desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def recent(self, limit: int = 10) -> List[AuditLog]:
        stmt = select(AuditLog).order_by(col(AuditLog.timestamp).desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())
