from typing import Optional, Tuple

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.settings_repository import ISettingsRepository
from src.domain.entities import Settings
from src.domain.entities.settings import SITE_SETTINGS_KEY


class SettingsRepository(ISettingsRepository):
    """Single-row settings store keyed by SITE_SETTINGS_KEY"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[Settings]:
        stmt = select(Settings).where(Settings.key == SITE_SETTINGS_KEY)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_or_create(self) -> Tuple[Settings, bool]:
        settings = await self.get()
        if settings is not None:
            return settings, False

        settings = Settings(key=SITE_SETTINGS_KEY)
        self.session.add(settings)
        await self.session.flush()
        await self.session.refresh(settings)
        return settings, True

    async def update(self, settings: Settings) -> Settings:
        self.session.add(settings)
        await self.session.flush()
        await self.session.refresh(settings)
        return settings
