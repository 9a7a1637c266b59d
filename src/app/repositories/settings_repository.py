from abc import ABC, abstractmethod
from typing import Optional, Tuple

from src.domain.entities import Settings


class ISettingsRepository(ABC):
    """Access to the single site settings row"""

    @abstractmethod
    async def get(self) -> Optional[Settings]:
        """Return the settings row, or None when it was never written"""
        pass

    @abstractmethod
    async def get_or_create(self) -> Tuple[Settings, bool]:
        """Return the settings row, creating it with defaults if missing"""
        pass

    @abstractmethod
    async def update(self, settings: Settings) -> Settings:
        pass
