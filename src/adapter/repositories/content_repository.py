"""
Generic SQL content repository.

One class serves every content resource; each instance is configured with
the entity table, the columns free-text search looks at, the JSON column
holding tags and the default ordering.
"""

import json
from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar
from uuid import UUID

from sqlalchemy import String, cast, func, or_, update
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.content_repository import ContentQuery, IContentRepository

ModelT = TypeVar("ModelT", bound=SQLModel)

# (column, descending)
Ordering = Sequence[Tuple[str, bool]]


class SqlContentRepository(IContentRepository[ModelT], Generic[ModelT]):
    """Content repository implementation using SQLModel"""

    def __init__(
        self,
        session: AsyncSession,
        model: Type[ModelT],
        search_fields: Sequence[str] = (),
        tag_field: Optional[str] = None,
        ordering: Ordering = (("created_at", True),),
    ):
        self.session = session
        self.model = model
        self.search_fields = tuple(search_fields)
        self.tag_field = tag_field
        self.ordering = tuple(ordering)

    def _column(self, name: str):
        return getattr(self.model, name)

    def _conditions(self, query: ContentQuery) -> List[Any]:
        conditions = [self._column(name) == value for name, value in query.equals.items()]

        if query.tag and self.tag_field:
            # Tags are stored as a JSON array; match the quoted element
            needle = json.dumps(query.tag)
            conditions.append(cast(self._column(self.tag_field), String).contains(needle))

        if query.search and self.search_fields:
            pattern = f"%{query.search}%"
            conditions.append(
                or_(*(self._column(name).ilike(pattern) for name in self.search_fields))
            )

        return conditions

    async def list(
        self, query: ContentQuery, page: int = 1, limit: Optional[int] = None
    ) -> Tuple[List[ModelT], int]:
        conditions = self._conditions(query)

        count_stmt = select(func.count()).select_from(self.model).where(*conditions)
        total = (await self.session.exec(count_stmt)).one()

        stmt = select(self.model).where(*conditions)
        for name, descending in self.ordering:
            column = self._column(name)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            stmt = stmt.offset((page - 1) * limit).limit(limit)

        result = await self.session.exec(stmt)
        return list(result.all()), total

    async def get_by_id(self, item_id: UUID) -> Optional[ModelT]:
        stmt = select(self.model).where(self.model.id == item_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[ModelT]:
        stmt = select(self.model).where(self._column("slug") == slug)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def slug_exists(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        stmt = select(self.model.id).where(self._column("slug") == slug)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first() is not None

    async def count(self, **equals: Any) -> int:
        conditions = [self._column(name) == value for name, value in equals.items()]
        stmt = select(func.count()).select_from(self.model).where(*conditions)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, item: ModelT) -> ModelT:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update(self, item: ModelT) -> ModelT:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete(self, item: ModelT) -> None:
        await self.session.delete(item)
        await self.session.flush()

    async def increment(self, item_id: UUID, column: str, amount: int = 1) -> bool:
        counter = self._column(column)
        stmt = (
            update(self.model)
            .where(self.model.id == item_id)
            .values({column: counter + amount})
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
