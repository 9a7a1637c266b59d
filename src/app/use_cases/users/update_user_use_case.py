"""
Update User Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AuditAction, User
from src.domain.result import Error, Result, Return
from .dtos import UpdateUserCommand


class UpdateUserUseCase:
    """
    Use case for a super-admin editing a user.

    Only name, role, active flag and password can change. A new password is
    hashed; the audit entry notes that it changed without storing it.
    """

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(
        self, actor_id: UUID, user_id: UUID, command: UpdateUserCommand
    ) -> Result[User]:
        changes = command.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            if command.first_name:
                user.first_name = command.first_name
            if command.last_name:
                user.last_name = command.last_name
            if command.role is not None:
                user.role = command.role
            if command.is_active is not None:
                user.is_active = command.is_active
            if command.password:
                user.password_hash = hash_password(command.password)
                changes["password"] = "changed"
            user.updated_at = utcnow()

            user = await self.uow.users.update(user)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id, AuditAction.update, "User", user.id, changes=changes
            )

            return Return.ok(user)
