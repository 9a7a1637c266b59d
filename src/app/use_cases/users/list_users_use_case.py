from typing import List, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, UserRole
from src.domain.result import Result, Return


class ListUsersUseCase:
    """Lists users newest first, searching first/last name and email."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, search: Optional[str] = None, role: Optional[str] = None
    ) -> Result[List[User]]:
        # Unknown roles are ignored rather than rejected
        role_filter = None
        if role:
            try:
                role_filter = UserRole(role)
            except ValueError:
                role_filter = None

        async with self.uow:
            users = await self.uow.users.list(search=search or None, role=role_filter)

        return Return.ok(users)
