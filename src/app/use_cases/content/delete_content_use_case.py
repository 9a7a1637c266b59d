"""
Delete Content Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction
from src.domain.result import Error, Result, Return

from .resources import ContentResource


class DeleteContentUseCase:
    """Hard-deletes a content item and records a delete audit entry."""

    def __init__(
        self,
        uow: UnitOfWork,
        resource: ContentResource,
        meta: Optional[RequestMeta] = None,
    ):
        self.uow = uow
        self.resource = resource
        self.meta = meta

    async def execute(self, actor_id: UUID, item_id: UUID) -> Result[None]:
        async with self.uow:
            repository = getattr(self.uow, self.resource.repository)
            item = await repository.get_by_id(item_id)
            if item is None:
                return Return.err(Error("NOT_FOUND", self.resource.not_found))

            await repository.delete(item)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id, AuditAction.delete, self.resource.name, item_id
            )

            return Return.ok(None)
