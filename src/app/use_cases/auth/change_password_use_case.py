"""
Change Password Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.passwords import hash_password, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditAction
from src.domain.result import Error, Result, Return
from .dtos import ChangePasswordCommand


class ChangePasswordUseCase:
    """
    Use case for a user changing their own password.

    Business Rules:
    - The current password must match
    - The audit entry records that the password changed, never its value
    """

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(self, user_id: UUID, command: ChangePasswordCommand) -> Result[None]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            if not verify_password(command.current_password, user.password_hash):
                return Return.err(
                    Error("INVALID_PASSWORD", "Current password is incorrect")
                )

            user.password_hash = hash_password(command.new_password)
            user.updated_at = utcnow()
            await self.uow.users.update(user)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                user.id,
                AuditAction.update,
                "User",
                user.id,
                changes={"field": "password", "action": "changed"},
            )

            return Return.ok(None)
