from .resolver import Resolution, ResolverConfig, ResponseResolver
from .responses import DEFAULT_RESPONSE_TABLE, LanguageResponses, ResponseTable
from .schemas import ChatMessage


__all__ = [
    "DEFAULT_RESPONSE_TABLE",
    "ChatMessage",
    "LanguageResponses",
    "Resolution",
    "ResolverConfig",
    "ResponseResolver",
    "ResponseTable",
]
