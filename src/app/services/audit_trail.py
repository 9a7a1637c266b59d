"""
Audit Trail Writer

Appends one immutable AuditLog row per mutation or auth event.
"""

from dataclasses import dataclass
from typing import Any, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, AuditLog


@dataclass(frozen=True)
class RequestMeta:
    """Where a request came from, captured by the HTTP layer"""

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class AuditTrail:
    """
    Writes audit entries through the caller's unit of work.

    The entry is committed on its own, after the mutation it describes has
    already been committed. A failing write raises; the mutation stays.
    """

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta or RequestMeta()

    async def record(
        self,
        actor_id: UUID,
        action: AuditAction,
        resource_type: str,
        resource_id: Optional[UUID] = None,
        changes: Optional[Any] = None,
    ) -> AuditLog:
        entry = AuditLog(
            user_id=actor_id,
            action=action,
            resource=resource_type,
            resource_id=resource_id,
            changes=changes,
            ip_address=self.meta.ip_address,
            user_agent=self.meta.user_agent,
        )
        entry = await self.uow.audit_logs.create(entry)
        await self.uow.commit()
        return entry
