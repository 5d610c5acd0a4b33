from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from promptlab.config.settings import Settings, get_settings

from .resolver import ResolverConfig, ResponseResolver


@lru_cache
def build_response_resolver(config: ResolverConfig) -> ResponseResolver:
    """Get the resolver for a config, constructing it only once."""
    return ResponseResolver(config)


def get_response_resolver(settings: Annotated[Settings, Depends(get_settings)]) -> ResponseResolver:
    """Resolver for the current settings."""
    return build_response_resolver(ResolverConfig.from_settings(settings))


ResolverDep = Annotated[ResponseResolver, Depends(get_response_resolver)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
