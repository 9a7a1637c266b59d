"""
Create User Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.audit_trail import AuditTrail, RequestMeta
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, User
from src.domain.result import Error, Result, Return
from .dtos import CreateUserCommand


class CreateUserUseCase:
    """
    Use case for an administrator creating a user account.

    Business Rules:
    - Email must be unique (stored lowercased)
    - Role defaults to content-manager
    - Password stored as bcrypt hash
    """

    def __init__(self, uow: UnitOfWork, meta: Optional[RequestMeta] = None):
        self.uow = uow
        self.meta = meta

    async def execute(self, actor_id: UUID, command: CreateUserCommand) -> Result[User]:
        email = command.email.lower()

        async with self.uow:
            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "User already exists"))

            user = User(
                email=email,
                password_hash=hash_password(command.password),
                first_name=command.first_name,
                last_name=command.last_name,
                role=command.role,
            )
            user = await self.uow.users.create(user)
            await self.uow.commit()

            await AuditTrail(self.uow, self.meta).record(
                actor_id,
                AuditAction.create,
                "User",
                user.id,
                changes=command.model_dump(
                    mode="json", by_alias=True, exclude={"password"}
                ),
            )

            return Return.ok(user)
