import asyncio
import logging
from typing import Any, Protocol

import litellm
from pydantic import BaseModel, ConfigDict

from promptlab.ai.errors import classify_error


logger = logging.getLogger(__name__)


class CompletionResult(BaseModel):
    """Text produced by one remote completion.

    ``text`` is ``None`` whenever the provider response does not carry a
    string in ``choices[0].message.content``.
    """

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    model: str | None = None

    @classmethod
    def from_response(cls, raw_response: Any) -> "CompletionResult":
        """Build a result from a provider response without trusting its shape."""
        model = getattr(raw_response, "model", None)
        if not isinstance(model, str):
            model = None

        choices = getattr(raw_response, "choices", None)
        if not isinstance(choices, (list, tuple)) or not choices:
            return cls(model=model)

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str):
            return cls(model=model)

        return cls(text=content, model=model)


class TextGenerationClient(Protocol):
    """Anything able to answer a list of chat messages with one completion."""

    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> CompletionResult: ...


class LLMClient:
    """Issues completion requests to the hosted model through LiteLLM."""

    def __init__(self, api_key: str, model: str = "gpt-4o", timeout: float = 10.0) -> None:
        """Initialize LLMClient.

        Args:
            api_key: Provider credential, sent with every request
            model: LiteLLM model identifier
            timeout: Upper bound in seconds for a single request
        """
        self._api_key = api_key
        self._model = model
        self._timeout = timeout

    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> CompletionResult:
        """Run one completion and return its text.

        Raises:
            AIRuntimeError: Any provider, transport or timeout failure, classified.
        """
        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": messages,
            "api_key": self._api_key,
            "timeout": self._timeout,
        }
        if temperature is not None:
            kwargs["temperature"] = temperature
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            response = await asyncio.wait_for(litellm.acompletion(**kwargs), timeout=self._timeout)
        except Exception as e:
            error = classify_error(e)
            logger.warning("Completion with %s failed (%s): %s", self._model, error.category.value, e)
            raise error from e

        return CompletionResult.from_response(response)

    async def validate_key(self) -> None:
        """Check the credential with the smallest possible request.

        Raises:
            AIRuntimeError: The provider rejected the request.
        """
        await self.complete(
            messages=[{"role": "user", "content": "ping"}],
            temperature=0,
            max_tokens=1,
        )
