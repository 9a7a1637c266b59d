"""
Counter use cases: news views and publication downloads.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return

from .resources import NEWS, PUBLICATIONS


class RecordViewUseCase:
    """
    Adds one view to a news article.

    Runs after the read has been answered, on its own unit of work. The
    increment is a single UPDATE so concurrent readers never lose a count.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, news_id: UUID) -> Result[None]:
        async with self.uow:
            updated = await self.uow.news.increment(news_id, "views")
            if not updated:
                return Return.err(Error("NOT_FOUND", NEWS.not_found))
            await self.uow.commit()
            return Return.ok(None)


class RecordDownloadUseCase:
    """Counts a publication download and returns the file URL to redirect to."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, publication_id: UUID) -> Result[str]:
        async with self.uow:
            publication = await self.uow.publications.get_by_id(publication_id)
            if publication is None:
                return Return.err(Error("NOT_FOUND", PUBLICATIONS.not_found))

            await self.uow.publications.increment(publication_id, "download_count")
            await self.uow.commit()
            return Return.ok(publication.file_url)
