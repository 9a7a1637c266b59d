"""
Create Content Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import CamelModel
from src.domain.base import utcnow
from src.domain.content_rules import slugify, stamp_published_at
from src.domain.entities import AuditAction
from src.domain.result import Error, Result, Return

from .resources import ContentResource


class CreateContentUseCase:
    """
    Use case for creating a content item.

    Business Rules:
    - The caller is stamped as owner where the resource has one
    - Slugged resources derive the slug from the title when none is given
      and reject a slug that is already taken (SLUG_CONFLICT)
    - News gets published_at when created as published
    - One audit entry (create) carrying the full payload, written after commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        resource: ContentResource,
        meta: Optional[RequestMeta] = None,
    ):
        self.uow = uow
        self.resource = resource
        self.meta = meta

    async def execute(self, actor_id: UUID, command: CamelModel) -> Result:
        resource = self.resource
        data = command.model_dump()

        async with self.uow:
            repository = getattr(self.uow, resource.repository)

            if resource.slugged:
                data["slug"] = data.get("slug") or slugify(data["title"])
                if not data["slug"]:
                    return Return.err(
                        Error("VALIDATION_ERROR", "A slug cannot be derived from this title")
                    )
                if await repository.slug_exists(data["slug"]):
                    return Return.err(
                        Error("SLUG_CONFLICT", f"Slug '{data['slug']}' is already in use")
                    )

            if resource.owner_field:
                data[resource.owner_field] = actor_id

            item = resource.entity(**data)
            if resource.stamps_published_at:
                item.published_at = stamp_published_at(item.status, None, utcnow())

            item = await repository.create(item)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id,
                AuditAction.create,
                resource.name,
                item.id,
                changes=command.model_dump(mode="json", by_alias=True, exclude_unset=True),
            )

            return Return.ok(item)
