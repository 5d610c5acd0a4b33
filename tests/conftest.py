"""Pytest configuration and shared fixtures.

Testing Strategy:
1. Hosted model: never called; a recording stub stands in for the LLM client
2. Settings: built explicitly, never read from the developer's .env
3. HTTP: the real FastAPI app over httpx's ASGI transport
"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio

from promptlab.ai.assistant.dependencies import get_response_resolver
from promptlab.ai.assistant.resolver import ResolverConfig, ResponseResolver
from promptlab.config.settings import Settings, get_settings
from promptlab.main import app
from promptlab.middleware.security import limiter
from tests.fixtures.llm import StubLLMClient


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., Settings]:
    """Build settings isolated from the environment and any .env file."""

    def _make(**overrides: Any) -> Settings:
        values: dict[str, Any] = {
            "OPENAI_API_KEY": None,
            "RESOURCES_DIR": str(tmp_path / "resources"),
            "ENVIRONMENT": "test",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def stub_client() -> StubLLMClient:
    return StubLLMClient(text="Answer X")


@pytest.fixture
def offline_resolver() -> ResponseResolver:
    """Resolver with no credential configured."""
    return ResponseResolver(ResolverConfig(api_key=None))


@pytest.fixture
def make_resolver() -> Callable[..., ResponseResolver]:
    def _make(client: Any, api_key: str | None = "sk-test", **config: Any) -> ResponseResolver:
        return ResponseResolver(ResolverConfig(api_key=api_key, **config), client=client)

    return _make


@pytest_asyncio.fixture
async def client_factory(make_settings) -> AsyncGenerator[Callable[..., Any], None]:
    """Create HTTP clients against the app with the given settings and resolver."""
    clients: list[httpx.AsyncClient] = []

    async def _create(
        settings: Settings | None = None,
        resolver: ResponseResolver | None = None,
    ) -> httpx.AsyncClient:
        resolved_settings = settings or make_settings()
        app.dependency_overrides[get_settings] = lambda: resolved_settings
        if resolver is not None:
            app.dependency_overrides[get_response_resolver] = lambda: resolver
        client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    limiter.reset()
    yield _create

    for client in clients:
        await client.aclose()
    app.dependency_overrides.clear()
