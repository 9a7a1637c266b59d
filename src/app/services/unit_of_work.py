from abc import ABC, abstractmethod

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.app.repositories.content_repository import IContentRepository
from src.app.repositories.settings_repository import ISettingsRepository
from src.app.repositories.user_repository import IUserRepository
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


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    audit_logs: IAuditLogRepository
    settings: ISettingsRepository
    news: IContentRepository[News]
    publications: IContentRepository[Publication]
    regulations: IContentRepository[Regulation]
    media: IContentRepository[Media]
    pages: IContentRepository[StaticPage]
    portals: IContentRepository[Portal]
    faqs: IContentRepository[FAQ]
    board_members: IContentRepository[BoardMember]
    ads: IContentRepository[Ad]
    contacts: IContentRepository[ContactSubmission]

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
