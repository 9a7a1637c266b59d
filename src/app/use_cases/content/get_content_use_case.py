"""
Get Content Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.policy import Identity
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return

from .resources import ContentResource


class GetContentUseCase:
    """
    Use case for reading one content item by id or slug.

    Items hidden from anonymous callers are reported as NOT_FOUND so that
    their existence is not revealed.
    """

    def __init__(self, uow: UnitOfWork, resource: ContentResource):
        self.uow = uow
        self.resource = resource

    async def execute(
        self,
        identity: Optional[Identity] = None,
        item_id: Optional[UUID] = None,
        slug: Optional[str] = None,
    ) -> Result:
        async with self.uow:
            repository = getattr(self.uow, self.resource.repository)
            if slug is not None:
                item = await repository.get_by_slug(slug)
            else:
                item = await repository.get_by_id(item_id)

        if item is None:
            return Return.err(Error("NOT_FOUND", self.resource.not_found))
        if identity is None and not self.resource.is_visible(item):
            return Return.err(Error("NOT_FOUND", self.resource.not_found))

        return Return.ok(item)
