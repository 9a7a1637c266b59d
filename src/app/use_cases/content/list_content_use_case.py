"""
List Content Use Case
"""

from typing import Optional

from src.app.policy import Identity
from src.app.repositories.content_repository import ContentQuery
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Result, Return

from .dtos import ContentPage
from .resources import ContentResource


class ListContentUseCase:
    """
    Use case for listing any content resource.

    Business Rules:
    - Anonymous callers only ever see visible items; the visibility filter
      overrides whatever the caller asked for
    - Authenticated callers may filter on the visibility column themselves
    - total is counted before pagination
    """

    def __init__(self, uow: UnitOfWork, resource: ContentResource):
        self.uow = uow
        self.resource = resource

    async def execute(
        self,
        query: ContentQuery,
        identity: Optional[Identity] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> Result[ContentPage]:
        if identity is None and self.resource.visibility is not None:
            column, value = self.resource.visibility
            query.equals[column] = value

        async with self.uow:
            repository = getattr(self.uow, self.resource.repository)
            items, total = await repository.list(query, page=page, limit=limit)

        return Return.ok(ContentPage(items=items, total=total, page=page, limit=limit))
