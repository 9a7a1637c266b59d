from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction
from src.domain.result import Result, Return


class LogoutUseCase:
    """Records the logout. Tokens are stateless; the client discards them."""

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(self, user_id: UUID) -> Result[None]:
        async with self.uow:
            await AuditTrail(self.uow, self.meta).record(
                user_id, AuditAction.logout, "User", user_id
            )
        return Return.ok(None)
