"""Unified internal error taxonomy for LLM runtime failures."""

from __future__ import annotations

import asyncio
from enum import Enum

import litellm


class AIRuntimeErrorCategory(str, Enum):
    """Stable categories used across the LLM runtime path."""

    RATE_LIMIT_OR_QUOTA = "rate_limit_or_quota"
    TIMEOUT = "timeout"
    AUTHENTICATION = "authentication"
    PROVIDER_FAILURE = "provider_failure"


class AIRuntimeError(RuntimeError):
    """Base exception for all runtime failures produced by the LLM client."""

    def __init__(self, message: str, *, category: AIRuntimeErrorCategory) -> None:
        super().__init__(message)
        self.category = category


class AIRateLimitOrQuotaError(AIRuntimeError):
    """Raised when the provider reports quota exhaustion or rate limiting."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=AIRuntimeErrorCategory.RATE_LIMIT_OR_QUOTA)


class AITimeoutError(AIRuntimeError):
    """Raised when an LLM runtime operation exceeds timeout."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=AIRuntimeErrorCategory.TIMEOUT)


class AIAuthenticationError(AIRuntimeError):
    """Raised when the provider rejects the configured credential."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=AIRuntimeErrorCategory.AUTHENTICATION)


class AIProviderError(AIRuntimeError):
    """Raised for generic provider-side runtime failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=AIRuntimeErrorCategory.PROVIDER_FAILURE)


def classify_error(exc: BaseException) -> AIRuntimeError:
    """Map a provider or transport exception onto the runtime taxonomy."""
    if isinstance(exc, AIRuntimeError):
        return exc
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, litellm.Timeout)):
        return AITimeoutError(f"Model request timed out: {exc}")
    if isinstance(exc, litellm.RateLimitError):
        return AIRateLimitOrQuotaError(f"Model provider rate limit or quota reached: {exc}")
    if isinstance(exc, litellm.AuthenticationError):
        return AIAuthenticationError(f"Model provider rejected the API key: {exc}")
    return AIProviderError(f"Model completion failed: {exc}")
