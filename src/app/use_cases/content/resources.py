"""
Content resource descriptors.

One ContentResource per resource type tells the generic content use cases
which repository to use, which schema validates writes, who owns an item
and what anonymous callers are allowed to see.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type

from sqlmodel import SQLModel

from src.app.use_cases.schema import CamelModel
from src.domain.entities import (
    FAQ,
    Ad,
    AdStatus,
    BoardMember,
    ContactSubmission,
    ContentStatus,
    Media,
    News,
    Portal,
    Publication,
    Regulation,
    StaticPage,
)

from .commands import (
    AdCommand,
    BoardMemberCommand,
    ContactStatusCommand,
    FAQCommand,
    MediaCommand,
    NewsCommand,
    PageCommand,
    PortalCommand,
    PublicationCommand,
    RegulationCommand,
)


@dataclass(frozen=True)
class ContentResource:
    name: str  # resource type written to audit entries
    repository: str  # UnitOfWork attribute
    not_found: str
    command: Type[CamelModel]
    entity: Type[SQLModel]
    owner_field: Optional[str] = None
    restamp_owner: bool = False  # owner field tracks the latest editor
    visibility: Optional[Tuple[str, Any]] = None  # (column, value) anonymous callers may see
    slugged: bool = False
    stamps_published_at: bool = False
    default_limit: Optional[int] = None

    def is_visible(self, item: Any) -> bool:
        if self.visibility is None:
            return True
        column, value = self.visibility
        return getattr(item, column) == value


NEWS = ContentResource(
    name="News",
    repository="news",
    not_found="News article not found",
    command=NewsCommand,
    entity=News,
    owner_field="author_id",
    visibility=("status", ContentStatus.published),
    slugged=True,
    stamps_published_at=True,
    default_limit=10,
)

PUBLICATIONS = ContentResource(
    name="Publication",
    repository="publications",
    not_found="Publication not found",
    command=PublicationCommand,
    entity=Publication,
    owner_field="created_by",
    default_limit=10,
)

REGULATIONS = ContentResource(
    name="Regulation",
    repository="regulations",
    not_found="Regulation not found",
    command=RegulationCommand,
    entity=Regulation,
    owner_field="created_by",
    visibility=("status", ContentStatus.published),
    default_limit=10,
)

MEDIA = ContentResource(
    name="Media",
    repository="media",
    not_found="Media not found",
    command=MediaCommand,
    entity=Media,
    owner_field="uploaded_by",
    default_limit=20,
)

PAGES = ContentResource(
    name="StaticPage",
    repository="pages",
    not_found="Page not found",
    command=PageCommand,
    entity=StaticPage,
    owner_field="last_edited_by",
    restamp_owner=True,
    visibility=("is_published", True),
    slugged=True,
)

PORTALS = ContentResource(
    name="Portal",
    repository="portals",
    not_found="Portal not found",
    command=PortalCommand,
    entity=Portal,
    owner_field="created_by",
    visibility=("is_active", True),
)

FAQS = ContentResource(
    name="FAQ",
    repository="faqs",
    not_found="FAQ not found",
    command=FAQCommand,
    entity=FAQ,
    owner_field="created_by",
    visibility=("is_published", True),
)

BOARD_MEMBERS = ContentResource(
    name="BoardMember",
    repository="board_members",
    not_found="Board member not found",
    command=BoardMemberCommand,
    entity=BoardMember,
    visibility=("is_active", True),
)

ADS = ContentResource(
    name="Ad",
    repository="ads",
    not_found="Ad not found",
    command=AdCommand,
    entity=Ad,
    owner_field="author_id",
    visibility=("status", AdStatus.published),
    default_limit=10,
)

CONTACTS = ContentResource(
    name="ContactSubmission",
    repository="contacts",
    not_found="Submission not found",
    command=ContactStatusCommand,
    entity=ContactSubmission,
    default_limit=20,
)
