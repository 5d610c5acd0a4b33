"""Schemas for the assistant module - dead simple."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Single transcript entry; the transcript itself lives with the caller."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Request schema for chat endpoints."""

    message: str | None = Field(default=None, description="User message to answer")
    language: str | None = Field(
        default=None,
        description="'es' selects Spanish; any other value is answered in English. Defaults to 'es'.",
    )


class ChatResponse(BaseModel):
    """Reply returned to the chat widget."""

    message: str
    source: Literal["remote", "fallback"]


class KeyValidationResponse(BaseModel):
    """Outcome of checking the configured OpenAI credential."""

    valid: bool
    message: str
