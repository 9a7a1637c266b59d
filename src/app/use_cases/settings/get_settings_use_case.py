from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Settings
from src.domain.result import Result, Return


class GetSettingsUseCase:
    """Public read of the site settings; None until an admin saves them."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[Optional[Settings]]:
        async with self.uow:
            settings = await self.uow.settings.get()
        return Return.ok(settings)
