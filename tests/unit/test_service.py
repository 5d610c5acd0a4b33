"""Unit tests for API key validation."""

import pytest

from promptlab.ai.assistant.service import validate_api_key
from promptlab.ai.errors import AIAuthenticationError, AIRuntimeErrorCategory
from tests.fixtures.llm import StubLLMClient


@pytest.mark.asyncio
async def test_missing_key_is_reported_without_calling_provider(make_settings, stub_client):
    result = await validate_api_key(make_settings(), client=stub_client)

    assert result.valid is False
    assert result.message == "No API key found in environment variables"
    assert stub_client.calls == []


@pytest.mark.asyncio
async def test_accepted_key(make_settings, stub_client):
    result = await validate_api_key(make_settings(OPENAI_API_KEY="sk-test"), client=stub_client)

    assert result.valid is True
    assert result.message == "API key is valid"
    assert stub_client.calls[0]["max_tokens"] == 1


@pytest.mark.asyncio
async def test_rejected_key_reports_reason(make_settings):
    error = AIAuthenticationError("Incorrect API key provided")
    client = StubLLMClient(error=error)

    result = await validate_api_key(make_settings(OPENAI_API_KEY="sk-wrong"), client=client)

    assert error.category == AIRuntimeErrorCategory.AUTHENTICATION
    assert result.valid is False
    assert result.message == "API key validation failed: Incorrect API key provided"
