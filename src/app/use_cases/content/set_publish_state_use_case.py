"""
Set Publish State Use Case

Publishes or unpublishes a news article.
"""

from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.content_rules import stamp_published_at
from src.domain.entities import AuditAction, ContentStatus
from src.domain.result import Error, Result, Return

from .resources import NEWS, ContentResource


class SetPublishStateUseCase:
    """
    Use case for the publish / unpublish actions.

    Business Rules:
    - publish sets status=published and stamps published_at if unset
    - unpublish returns the article to draft; published_at is kept
    - One audit entry with action publish or unpublish
    """

    def __init__(
        self,
        uow: UnitOfWork,
        resource: ContentResource = NEWS,
        meta: Optional[RequestMeta] = None,
    ):
        self.uow = uow
        self.resource = resource
        self.meta = meta

    async def execute(self, actor_id: UUID, item_id: UUID, publish: bool) -> Result:
        async with self.uow:
            repository = getattr(self.uow, self.resource.repository)
            item = await repository.get_by_id(item_id)
            if item is None:
                return Return.err(Error("NOT_FOUND", self.resource.not_found))

            item.status = ContentStatus.published if publish else ContentStatus.draft
            item.published_at = stamp_published_at(item.status, item.published_at, utcnow())
            item.updated_at = utcnow()

            item = await repository.update(item)
            await self.uow.commit()

            action = AuditAction.publish if publish else AuditAction.unpublish
            await AuditTrail(self.uow, self.meta).record(
                actor_id,
                action,
                self.resource.name,
                item.id,
                changes={"status": item.status.value},
            )

            return Return.ok(item)
