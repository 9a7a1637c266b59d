from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction
from src.domain.result import Error, Result, Return


class DeleteUserUseCase:
    """Hard-deletes a user. Nobody can delete their own account."""

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(self, actor_id: UUID, user_id: UUID) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            if user.id == actor_id:
                return Return.err(
                    Error("CANNOT_DELETE_SELF", "You cannot delete your own account")
                )

            await self.uow.users.delete(user)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id, AuditAction.delete, "User", user_id
            )

            return Return.ok(None)
