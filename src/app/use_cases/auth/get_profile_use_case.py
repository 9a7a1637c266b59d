from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole
from src.domain.result import Error, Result, Return
from .dtos import ProfileResponse


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

        if user is None:
            return Return.err(Error("NOT_FOUND", "User not found"))

        return Return.ok(
            ProfileResponse(
                id=str(user.id),
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                role=UserRole(user.role).value,
                is_active=user.is_active,
                last_login=user.last_login,
                created_at=user.created_at,
            )
        )
