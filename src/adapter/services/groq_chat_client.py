"""
Groq chat completions over its OpenAI-compatible HTTP API.
"""

import logging

import httpx

from src.app.services.chat_client import ChatServiceError, IChatClient

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_TOKENS = 1024


class GroqChatClient(IChatClient):
    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://api.groq.com/openai/v1",
        timeout_sec: float = 30.0,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout_sec)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def complete(self, system_prompt: str, message: str) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": message},
            ],
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions", json=payload, headers=headers
                )
        except httpx.TimeoutException as e:
            raise ChatServiceError("Groq request timed out") from e
        except httpx.HTTPError as e:
            raise ChatServiceError(f"Groq request failed: {e}") from e

        if response.status_code != 200:
            raise ChatServiceError(f"Groq returned status {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise ChatServiceError("Groq response body is not valid JSON") from e

        choices = body.get("choices") or []
        if not choices:
            return ""
        logger.info("Chat completion served by %s", self.model)
        return (choices[0].get("message") or {}).get("content") or ""
