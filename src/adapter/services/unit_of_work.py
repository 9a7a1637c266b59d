from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.content_repository import SqlContentRepository
from src.adapter.repositories.settings_repository import SettingsRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    FAQ,
    Ad,
    BoardMember,
    ContactSubmission,
    Media,
    News,
    Portal,
    Publication,
    Regulation,
    StaticPage,
)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.settings = SettingsRepository(self.session)
        self.news = SqlContentRepository(
            self.session,
            News,
            search_fields=("title", "content"),
            tag_field="tags",
            ordering=(("published_at", True), ("created_at", True)),
        )
        self.publications = SqlContentRepository(
            self.session,
            Publication,
            search_fields=("title", "description"),
            ordering=(("published_at", True), ("created_at", True)),
        )
        self.regulations = SqlContentRepository(
            self.session,
            Regulation,
            search_fields=("title", "description"),
            tag_field="tags",
            ordering=(("effective_date", True), ("created_at", True)),
        )
        self.media = SqlContentRepository(
            self.session,
            Media,
            search_fields=("title", "description"),
            tag_field="tags",
            ordering=(("uploaded_at", True), ("created_at", True)),
        )
        self.pages = SqlContentRepository(
            self.session, StaticPage, ordering=(("order", False), ("title", False))
        )
        self.portals = SqlContentRepository(
            self.session, Portal, ordering=(("order", False), ("name", False))
        )
        self.faqs = SqlContentRepository(
            self.session,
            FAQ,
            search_fields=("question", "answer"),
            ordering=(("order", False), ("created_at", True)),
        )
        self.board_members = SqlContentRepository(
            self.session, BoardMember, ordering=(("order", False),)
        )
        self.ads = SqlContentRepository(
            self.session,
            Ad,
            search_fields=("title", "content"),
            ordering=(("order", False), ("created_at", True)),
        )
        self.contacts = SqlContentRepository(
            self.session,
            ContactSubmission,
            search_fields=("name", "email", "subject"),
            ordering=(("created_at", True),),
        )
        return self

    async def __aexit__(self, *args):
        # Detach loaded entities so the rollback does not expire them
        self.session.expunge_all()
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
