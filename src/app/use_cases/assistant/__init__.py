from .chat_use_case import FALLBACK_REPLY, SYSTEM_PROMPT, ChatUseCase

__all__ = ["FALLBACK_REPLY", "SYSTEM_PROMPT", "ChatUseCase"]
