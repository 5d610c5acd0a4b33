"""Assistant API router - practice chat endpoints."""

import logging

from fastapi import APIRouter, Request

from promptlab.exceptions import ValidationError
from promptlab.middleware.security import ai_rate_limit

from .dependencies import ResolverDep, SettingsDep
from .schemas import ChatRequest, ChatResponse, KeyValidationResponse
from .service import validate_api_key


logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "es"

router = APIRouter(prefix="/api", tags=["assistant"])


def _require_message(payload: ChatRequest) -> str:
    if not payload.message:
        msg = "Message is required"
        raise ValidationError(msg)
    return payload.message


@router.post("/chat")
@ai_rate_limit
async def chat_endpoint(request: Request, payload: ChatRequest, resolver: ResolverDep) -> ChatResponse:
    """Answer a practice message, using the hosted model when it is configured."""
    message = _require_message(payload)
    language = payload.language or DEFAULT_LANGUAGE

    resolution = await resolver.resolve_with_source(message, language)
    logger.info("Chat reply resolved from %s (language=%s)", resolution.source, language)
    return ChatResponse(message=resolution.text, source=resolution.source)


@router.post("/chat/predefined")
async def predefined_chat_endpoint(payload: ChatRequest, resolver: ResolverDep) -> ChatResponse:
    """Answer from the predefined replies only, without contacting the model."""
    message = _require_message(payload)
    language = payload.language or DEFAULT_LANGUAGE
    return ChatResponse(message=resolver.fallback(message, language), source="fallback")


@router.get("/openai/validate")
async def validate_key_endpoint(settings: SettingsDep) -> KeyValidationResponse:
    """Check whether the configured OpenAI key is usable."""
    return await validate_api_key(settings)
