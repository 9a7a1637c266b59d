from abc import ABC, abstractmethod


class ChatServiceError(Exception):
    """Raised when the language-model provider fails"""


class IChatClient(ABC):
    """Chat-completion provider behind the site assistant"""

    @property
    @abstractmethod
    def configured(self) -> bool:
        """False when no provider credential is available"""
        pass

    @abstractmethod
    async def complete(self, system_prompt: str, message: str) -> str:
        pass
