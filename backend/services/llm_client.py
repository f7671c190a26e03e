"""Chat-completion capability used by the matcher, with a Gemini implementation.

The matcher only depends on :class:`LLMClient`; provider, transport and
auth stay behind it. Clients return raw text and never parse it.
"""

import logging
from abc import ABC, abstractmethod

from google import genai
from google.genai import types

from config import settings
from services.exceptions import LLMServiceError

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Anything that can answer a (system prompt, user prompt) pair with text."""

    provider: str = ""

    @abstractmethod
    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Return the model's raw text. Raises LLMServiceError on failure."""


class GeminiClient(LLMClient):
    provider = "gemini"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.temperature = (
            temperature if temperature is not None else settings.llm_temperature
        )
        self.max_output_tokens = max_output_tokens or settings.llm_max_output_tokens
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if not self.api_key:
            raise LLMServiceError("No GEMINI_API_KEY set", provider=self.provider)
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=user_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            raise LLMServiceError(f"LLM analysis failed: {e}", provider=self.provider) from e

        return (response.text or "").strip()


_client: LLMClient | None = None


def get_llm_client() -> LLMClient:
    global _client
    if _client is None:
        if not settings.gemini_api_key:
            logger.warning("No GEMINI_API_KEY set - matching will fail until configured")
        _client = GeminiClient()
    return _client
