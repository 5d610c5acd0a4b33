"""Chat reply resolution: hosted model first, canned keyword replies otherwise."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from promptlab.ai.client import LLMClient, TextGenerationClient
from promptlab.ai.prompts import get_assistant_system_prompt
from promptlab.config.settings import Settings

from .responses import DEFAULT_RESPONSE_TABLE, ResponseTable
from .schemas import ChatMessage


logger = logging.getLogger(__name__)


class ResolverConfig(BaseModel):
    """Everything the resolver needs, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = None
    model: str = "gpt-4o"
    max_tokens: int = Field(default=250, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    timeout: float = Field(default=10.0, gt=0)
    responses: ResponseTable = DEFAULT_RESPONSE_TABLE

    @property
    def api_key_present(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResolverConfig":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.PRIMARY_LLM_MODEL,
            max_tokens=settings.CHAT_MAX_TOKENS,
            temperature=settings.CHAT_TEMPERATURE,
            timeout=settings.AI_REQUEST_TIMEOUT,
        )


class Resolution(BaseModel):
    """A reply together with the path that produced it."""

    model_config = ConfigDict(frozen=True)

    text: str
    source: Literal["remote", "fallback"]


class ResponseResolver:
    """Answers practice-chat messages.

    Never raises: a missing credential, any remote failure and an empty remote
    reply all end in the keyword table for the requested language.
    """

    def __init__(self, config: ResolverConfig, client: TextGenerationClient | None = None) -> None:
        self._config = config
        self._client = client
        if self._client is None and config.api_key_present:
            api_key = (config.api_key or "").strip()
            if not api_key.startswith("sk-"):
                logger.warning("OPENAI_API_KEY does not look like an OpenAI key; using it anyway")
            self._client = LLMClient(api_key=api_key, model=config.model, timeout=config.timeout)

    @property
    def remote_enabled(self) -> bool:
        return self._client is not None and self._config.api_key_present

    def fallback(self, message: str, language: str | None) -> str:
        """Reply from the keyword table only."""
        return self._config.responses.lookup(message, language)

    async def resolve(self, message: str, language: str | None) -> str:
        """Return a non-empty reply for ``message``."""
        resolution = await self.resolve_with_source(message, language)
        return resolution.text

    async def resolve_with_source(self, message: str, language: str | None) -> Resolution:
        if not self.remote_enabled:
            logger.info("No OpenAI API key configured; using predefined response")
            return Resolution(text=self.fallback(message, language), source="fallback")

        text = await self._ask_remote(message, language)
        if text:
            return Resolution(text=text, source="remote")
        return Resolution(text=self.fallback(message, language), source="fallback")

    async def reply_to(self, message: ChatMessage, language: str | None) -> ChatMessage:
        """Answer a user transcript entry with an assistant entry."""
        text = await self.resolve(message.content, language)
        return ChatMessage(role="assistant", content=text)

    async def _ask_remote(self, message: str, language: str | None) -> str | None:
        messages = [
            {"role": "system", "content": get_assistant_system_prompt(language)},
            {"role": "user", "content": message},
        ]
        try:
            result = await self._client.complete(  # type: ignore[union-attr]
                messages=messages,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )
        except Exception:
            logger.exception("Remote completion failed; falling back to predefined response")
            return None

        text = getattr(result, "text", None)
        if not isinstance(text, str) or not text:
            logger.warning("Remote completion returned no text; falling back to predefined response")
            return None
        return text
