from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
from uuid import UUID

ModelT = TypeVar("ModelT")


@dataclass
class ContentQuery:
    """
    Filters for a content list.

    All conditions are AND-combined: every ``equals`` pair must match, the
    item's tags must contain ``tag`` and at least one searchable field must
    contain ``search`` (case-insensitive).
    """

    equals: Dict[str, Any] = field(default_factory=dict)
    tag: Optional[str] = None
    search: Optional[str] = None


class IContentRepository(ABC, Generic[ModelT]):
    """Generic repository contract shared by every content resource"""

    @abstractmethod
    async def list(
        self, query: ContentQuery, page: int = 1, limit: Optional[int] = None
    ) -> Tuple[List[ModelT], int]:
        """
        Return one page of matching items and the total match count.

        ``limit=None`` disables pagination and returns every match.
        """
        pass

    @abstractmethod
    async def get_by_id(self, item_id: UUID) -> Optional[ModelT]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[ModelT]:
        pass

    @abstractmethod
    async def slug_exists(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        """True when another item already uses the slug"""
        pass

    @abstractmethod
    async def count(self, **equals: Any) -> int:
        pass

    @abstractmethod
    async def create(self, item: ModelT) -> ModelT:
        pass

    @abstractmethod
    async def update(self, item: ModelT) -> ModelT:
        pass

    @abstractmethod
    async def delete(self, item: ModelT) -> None:
        pass

    @abstractmethod
    async def increment(self, item_id: UUID, column: str, amount: int = 1) -> bool:
        """Atomically add ``amount`` to a counter column. False if no row matched."""
        pass
