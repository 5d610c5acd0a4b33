"""Assistant service helpers that sit around the resolver."""

import logging

from promptlab.ai.client import LLMClient
from promptlab.ai.errors import AIRuntimeError
from promptlab.config.settings import Settings

from .schemas import KeyValidationResponse


logger = logging.getLogger(__name__)


async def validate_api_key(settings: Settings, client: LLMClient | None = None) -> KeyValidationResponse:
    """Report whether the configured OpenAI key is accepted by the provider."""
    if not settings.api_key_present:
        return KeyValidationResponse(valid=False, message="No API key found in environment variables")

    client = client or LLMClient(
        api_key=(settings.OPENAI_API_KEY or "").strip(),
        model=settings.PRIMARY_LLM_MODEL,
        timeout=settings.AI_REQUEST_TIMEOUT,
    )
    try:
        await client.validate_key()
    except AIRuntimeError as e:
        logger.warning("OpenAI API key validation failed: %s", e)
        return KeyValidationResponse(valid=False, message=f"API key validation failed: {e}")

    return KeyValidationResponse(valid=True, message="API key is valid")
