"""Tests for the Gemini-backed LLM client."""

import os
from types import SimpleNamespace

import pytest

from services.exceptions import LLMServiceError
from services.llm_client import GeminiClient


@pytest.mark.asyncio
async def test_missing_api_key_raises_service_error():
    client = GeminiClient(api_key="")
    with pytest.raises(LLMServiceError) as exc_info:
        await client.generate("system", "user")
    assert exc_info.value.details == {"provider": "gemini"}


def test_settings_defaults_are_used():
    client = GeminiClient(api_key="test-key", model="gemini-test", temperature=0.0)
    assert client.model == "gemini-test"
    assert client.temperature == 0.0
    assert client.max_output_tokens > 0


class _StubModels:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.kwargs = None

    async def generate_content(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


def _client_with(models):
    client = GeminiClient(api_key="test-key", model="gemini-test")
    client._client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return client


@pytest.mark.asyncio
async def test_provider_error_wrapped_in_service_error():
    error = RuntimeError("429 quota exceeded")
    client = _client_with(_StubModels(error=error))

    with pytest.raises(LLMServiceError) as exc_info:
        await client.generate("system", "user")

    assert "429 quota exceeded" in exc_info.value.message
    assert exc_info.value.details == {"provider": "gemini"}
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_generate_returns_stripped_text():
    models = _StubModels(text='  {"overallScore": 7}\n')
    client = _client_with(models)

    assert await client.generate("system", "user") == '{"overallScore": 7}'
    assert models.kwargs["model"] == "gemini-test"
    assert models.kwargs["contents"] == "user"
    assert models.kwargs["config"].system_instruction == "system"


@pytest.mark.asyncio
async def test_empty_response_text():
    client = _client_with(_StubModels(text=None))
    assert await client.generate("system", "user") == ""


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.skipif(not os.environ.get("GEMINI_API_KEY"), reason="GEMINI_API_KEY not set")
async def test_gemini_round_trip():
    client = GeminiClient(api_key=os.environ["GEMINI_API_KEY"])
    text = await client.generate("Reply with a JSON object.", 'Return {"overallScore": 7}')
    assert text
