"""Unit tests for the chat response resolver."""

import asyncio
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from hypothesis import given
from hypothesis import settings as hypothesis_settings
from hypothesis import strategies as st

from promptlab.ai.assistant.dependencies import build_response_resolver, get_response_resolver
from promptlab.ai.assistant.resolver import ResolverConfig, ResponseResolver
from promptlab.ai.assistant.responses import DEFAULT_RESPONSE_TABLE, LanguageResponses, ResponseTable
from promptlab.ai.assistant.schemas import ChatMessage
from promptlab.ai.errors import AITimeoutError
from promptlab.ai.prompts import ASSISTANT_SYSTEM_PROMPT_EN, ASSISTANT_SYSTEM_PROMPT_ES
from tests.fixtures.llm import StubLLMClient


class TestWithoutCredential:
    """No API key: every reply comes from the table."""

    @pytest.mark.asyncio
    async def test_never_calls_remote(self, make_resolver, stub_client):
        resolver = make_resolver(stub_client, api_key=None)

        reply = await resolver.resolve("hola", "es")

        assert stub_client.calls == []
        assert reply == DEFAULT_RESPONSE_TABLE.lookup("hola", "es")

    @pytest.mark.asyncio
    async def test_blank_key_counts_as_missing(self, make_resolver, stub_client):
        resolver = make_resolver(stub_client, api_key="   ")

        resolution = await resolver.resolve_with_source("hello", "en")

        assert stub_client.calls == []
        assert resolution.source == "fallback"

    @pytest.mark.asyncio
    async def test_default_reply_when_nothing_matches(self, offline_resolver):
        assert await offline_resolver.resolve("xyzzy", "es") == DEFAULT_RESPONSE_TABLE.es.default

    def test_no_client_is_created(self, offline_resolver):
        assert offline_resolver.remote_enabled is False


class TestRemotePath:
    """API key configured: the hosted model answers first."""

    @pytest.mark.asyncio
    async def test_returns_remote_text_verbatim(self, make_resolver):
        client = StubLLMClient(text="  Answer X\n")
        resolver = make_resolver(client)

        resolution = await resolver.resolve_with_source("what is a prompt?", "en")

        assert resolution.text == "  Answer X\n"
        assert resolution.source == "remote"

    @pytest.mark.asyncio
    async def test_single_turn_request_shape(self, make_resolver, stub_client):
        resolver = make_resolver(stub_client)

        await resolver.resolve("¿Qué es un prompt?", "es")

        assert len(stub_client.calls) == 1
        call = stub_client.calls[0]
        assert call["messages"] == [
            {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT_ES},
            {"role": "user", "content": "¿Qué es un prompt?"},
        ]
        assert call["max_tokens"] == 250
        assert call["temperature"] == 0.7

    @pytest.mark.asyncio
    @pytest.mark.parametrize("language", ["en", "fr", None])
    async def test_non_spanish_uses_english_prompt(self, make_resolver, stub_client, language):
        resolver = make_resolver(stub_client)

        await resolver.resolve("hi", language)

        assert stub_client.calls[0]["messages"][0]["content"] == ASSISTANT_SYSTEM_PROMPT_EN

    @pytest.mark.asyncio
    async def test_generation_parameters_come_from_config(self, make_resolver, stub_client):
        resolver = make_resolver(stub_client, max_tokens=64, temperature=0.2)

        await resolver.resolve("hi", "en")

        assert stub_client.calls[0]["max_tokens"] == 64
        assert stub_client.calls[0]["temperature"] == 0.2


class TestRemoteFailure:
    """Remote misses behave exactly like having no credential."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [RuntimeError("boom"), AITimeoutError("slow"), ValueError("bad payload")],
    )
    async def test_error_falls_back(self, make_resolver, offline_resolver, error):
        resolver = make_resolver(StubLLMClient(error=error))

        for message, language in [("EXERCISE please", "en"), ("xyzzy", "es"), ("hola", "fr")]:
            assert await resolver.resolve(message, language) == await offline_resolver.resolve(message, language)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, ""])
    async def test_empty_text_falls_back(self, make_resolver, text):
        resolver = make_resolver(StubLLMClient(text=text))

        resolution = await resolver.resolve_with_source("help me", "en")

        assert resolution.source == "fallback"
        assert resolution.text == DEFAULT_RESPONSE_TABLE.lookup("help me", "en")

    @pytest.mark.asyncio
    async def test_untyped_result_falls_back(self, make_resolver):
        client = SimpleNamespace(complete=AsyncMock(return_value={"choice": "Answer X"}))
        resolver = make_resolver(client)

        assert await resolver.resolve("prompt", "en") == DEFAULT_RESPONSE_TABLE.lookup("prompt", "en")

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, make_resolver, caplog):
        resolver = make_resolver(StubLLMClient(error=RuntimeError("boom")))

        with caplog.at_level(logging.ERROR, logger="promptlab.ai.assistant.resolver"):
            await resolver.resolve("hola", "es")

        assert "Remote completion failed" in caplog.text

    @hypothesis_settings(deadline=None)
    @given(st.text(), st.sampled_from(["es", "en", "fr", None]))
    def test_failing_remote_always_answers(self, message: str, language):
        """Property test: a failing hosted model still yields the non-empty table reply."""
        resolver = ResponseResolver(
            ResolverConfig(api_key="sk-test"),
            client=StubLLMClient(error=RuntimeError("provider down")),
        )

        reply = asyncio.run(resolver.resolve(message, language))

        assert reply
        assert reply == DEFAULT_RESPONSE_TABLE.lookup(message, language)


class TestInjectedTable:
    """Custom tables are honored through the config."""

    @pytest.mark.asyncio
    async def test_first_match_wins_with_custom_table(self):
        table = ResponseTable(
            es=LanguageResponses(entries=(("hola", "R1"), ("ayuda", "R2")), default="D"),
            en=LanguageResponses(entries=(), default="E"),
        )
        resolver = ResponseResolver(ResolverConfig(responses=table))

        assert await resolver.resolve("hola, necesito ayuda", "es") == "R1"
        assert resolver.fallback("necesito ayuda", "es") == "R2"
        assert await resolver.resolve("anything", "fr") == "E"


class TestReplyTo:
    @pytest.mark.asyncio
    async def test_wraps_reply_as_assistant_message(self, make_resolver, stub_client):
        resolver = make_resolver(stub_client)

        reply = await resolver.reply_to(ChatMessage(role="user", content="hi"), "en")

        assert reply == ChatMessage(role="assistant", content="Answer X")


class TestDefaultClient:
    """Without an injected client the resolver talks to LiteLLM."""

    @pytest.mark.asyncio
    async def test_builds_llm_client_from_config(self):
        response = SimpleNamespace(
            model="gpt-4o",
            choices=[SimpleNamespace(message=SimpleNamespace(content="Remote reply"))],
        )
        with patch("promptlab.ai.client.litellm.acompletion", new=AsyncMock(return_value=response)) as completion:
            resolver = ResponseResolver(ResolverConfig(api_key=" sk-test ", timeout=5))
            reply = await resolver.resolve("hi", "en")

        assert reply == "Remote reply"
        kwargs = completion.await_args.kwargs
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["timeout"] == 5

    def test_unusual_key_format_only_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="promptlab.ai.assistant.resolver"):
            resolver = ResponseResolver(ResolverConfig(api_key="not-an-openai-key"))

        assert resolver.remote_enabled is True
        assert "does not look like an OpenAI key" in caplog.text

    def test_config_from_settings(self, make_settings):
        settings = make_settings(OPENAI_API_KEY="sk-abc", PRIMARY_LLM_MODEL="gpt-4o-mini", AI_REQUEST_TIMEOUT=3)

        config = ResolverConfig.from_settings(settings)

        assert config.api_key == "sk-abc"
        assert config.model == "gpt-4o-mini"
        assert config.timeout == 3
        assert config.max_tokens == 250
        assert config.temperature == 0.7



class TestResolverDependency:
    """The HTTP dependency reuses one resolver per configuration."""

    def test_same_settings_share_a_resolver(self, make_settings):
        build_response_resolver.cache_clear()
        settings = make_settings(OPENAI_API_KEY="sk-shared")

        assert get_response_resolver(settings) is get_response_resolver(settings)

    def test_key_format_warning_logged_once(self, make_settings, caplog):
        build_response_resolver.cache_clear()
        settings = make_settings(OPENAI_API_KEY="not-an-openai-key")

        with caplog.at_level(logging.WARNING, logger="promptlab.ai.assistant.resolver"):
            for _ in range(3):
                get_response_resolver(settings)

        assert caplog.text.count("does not look like an OpenAI key") == 1

    def test_changed_settings_get_a_new_resolver(self, make_settings):
        build_response_resolver.cache_clear()

        first = get_response_resolver(make_settings(OPENAI_API_KEY="sk-one"))
        second = get_response_resolver(make_settings(OPENAI_API_KEY="sk-two"))

        assert first is not second
        assert second.remote_enabled is True
