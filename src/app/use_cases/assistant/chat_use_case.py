"""
Chat Use Case

Answers visitor questions through the site assistant, Nuno.
"""

import logging

from src.app.services.chat_client import ChatServiceError, IChatClient
from src.domain.result import Error, Result, Return

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Nuno, an intelligent and helpful AI assistant for the Nigerian "
    "Upstream Petroleum Regulatory Commission (NUPRC). Assist users with "
    "information about NUPRC's regulations, services, and general oil and gas "
    "sector inquiries in Nigeria. Be professional, concise, and helpful."
)

FALLBACK_REPLY = (
    "I am Nuno, your AI assistant. My brain connection (API Key) is currently "
    "missing. Please ask the administrator to configure it."
)

EMPTY_REPLY = "Sorry, I couldn't generate a response."


class ChatUseCase:
    """
    Use case for one chat turn.

    Business Rules:
    - Without a provider credential a canned reply is returned
    - Provider failures are logged and reported as AI_SERVICE_ERROR
    """

    def __init__(self, client: IChatClient):
        self.client = client

    async def execute(self, message: str) -> Result[str]:
        if not self.client.configured:
            logger.warning("No chat provider API key configured, using fallback reply")
            return Return.ok(FALLBACK_REPLY)

        try:
            reply = await self.client.complete(SYSTEM_PROMPT, message)
        except ChatServiceError as exc:
            logger.error("Chat provider error: %s", exc)
            return Return.err(
                Error("AI_SERVICE_ERROR", "Failed to communicate with AI service")
            )

        return Return.ok(reply or EMPTY_REPLY)
