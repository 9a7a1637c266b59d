from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.domain.result import Error, Result, Return


class GetUserUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[User]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

        if user is None:
            return Return.err(Error("NOT_FOUND", "User not found"))
        return Return.ok(user)
