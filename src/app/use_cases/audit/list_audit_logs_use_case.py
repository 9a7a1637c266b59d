"""
List Audit Logs Use Case

Read side of the audit trail for admin activity views.
"""

from typing import List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditLog
from src.domain.result import Error, Result, Return


class ListAuditLogsUseCase:
    """
    Use case for browsing audit entries, newest first.

    Business Rules:
    - resource_type and resource_id select one resource's history
    - actor_id selects one user's activity
    - With no filter, the latest entries across all users are returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_id: Optional[UUID] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[UUID] = None,
        limit: int = 50,
    ) -> Result[List[AuditLog]]:
        if (resource_type is None) != (resource_id is None):
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    "resourceType and resourceId must be given together",
                )
            )

        async with self.uow:
            if resource_type is not None:
                entries = await self.uow.audit_logs.list_by_resource(
                    resource_type, resource_id, limit=limit
                )
            elif actor_id is not None:
                entries = await self.uow.audit_logs.list_by_actor(actor_id, limit=limit)
            else:
                entries = await self.uow.audit_logs.recent(limit=limit)

        return Return.ok(entries)
