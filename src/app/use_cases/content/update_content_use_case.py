"""
Update Content Use Case
"""

from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import ValidationError

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.schema import alias_keys, validation_error
from src.domain.base import utcnow
from src.domain.content_rules import slugify, stamp_published_at
from src.domain.entities import AuditAction
from src.domain.result import Error, Result, Return

from .resources import ContentResource


class UpdateContentUseCase:
    """
    Use case for partially updating a content item.

    Business Rules:
    - Only fields present in the patch change; the merged record is
      validated against the full write schema
    - Slugged resources re-derive the slug when the title changes and
      reject a slug used by another item
    - published_at is stamped on the first save as published, never moved
    - Resources that track their last editor record the caller
    - One audit entry (update) carrying the patch, written after commit
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

    async def execute(
        self, actor_id: UUID, item_id: UUID, patch: Dict[str, Any]
    ) -> Result:
        resource = self.resource
        patch = alias_keys(resource.command, patch)

        async with self.uow:
            repository = getattr(self.uow, resource.repository)
            item = await repository.get_by_id(item_id)
            if item is None:
                return Return.err(Error("NOT_FOUND", resource.not_found))

            merged = self._current_values(item)
            merged.update(patch)
            try:
                command = resource.command.model_validate(merged)
            except ValidationError as exc:
                return Return.err(validation_error(exc))
            data = command.model_dump()

            if resource.slugged:
                if data["title"] != item.title:
                    data["slug"] = slugify(data["title"])
                data["slug"] = data.get("slug") or item.slug
                if await repository.slug_exists(data["slug"], exclude_id=item.id):
                    return Return.err(
                        Error("SLUG_CONFLICT", f"Slug '{data['slug']}' is already in use")
                    )

            for column, value in data.items():
                setattr(item, column, value)
            if resource.restamp_owner:
                setattr(item, resource.owner_field, actor_id)
            if resource.stamps_published_at:
                item.published_at = stamp_published_at(
                    item.status, item.published_at, utcnow()
                )
            item.updated_at = utcnow()

            item = await repository.update(item)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id, AuditAction.update, resource.name, item.id, changes=patch
            )

            return Return.ok(item)

    def _current_values(self, item: Any) -> Dict[str, Any]:
        """The item's writable fields keyed by their wire names"""
        return {
            field.alias or name: getattr(item, name)
            for name, field in self.resource.command.model_fields.items()
        }
