from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import AuditLog


class IAuditLogRepository(ABC):
    """AuditLog repository interface - append-only"""

    @abstractmethod
    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Append a new audit entry (immutable)"""
        pass

    @abstractmethod
    async def list_by_actor(self, actor_id: UUID, limit: int = 50) -> List[AuditLog]:
        """Entries written by one user, newest first"""
        pass

    @abstractmethod
    async def list_by_resource(
        self, resource_type: str, resource_id: UUID, limit: int = 50
    ) -> List[AuditLog]:
        """Entries about one resource, newest first"""
        pass

    @abstractmethod
    async def recent(self, limit: int = 10) -> List[AuditLog]:
        """Latest entries across all users, newest first"""
        pass
