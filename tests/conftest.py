from typing import Callable

import httpx
import pytest

from gumloop_mcp import GumloopConfig, GumloopClient, ToolRegistry, build_default_registry
from helpers import TEST_BASE_URL, RecordingHandler


@pytest.fixture
def config() -> GumloopConfig:
    return GumloopConfig(api_key="test-key", base_url=TEST_BASE_URL)


@pytest.fixture
def registry() -> ToolRegistry:
    return build_default_registry()


@pytest.fixture
def make_client(config: GumloopConfig) -> Callable[[RecordingHandler], GumloopClient]:
    """Builds a GumloopClient whose HTTP traffic goes to the given handler."""

    def factory(handler: RecordingHandler) -> GumloopClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GumloopClient(config, http_client=http_client)

    return factory
