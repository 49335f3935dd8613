"""Fixtures for catalog client tests."""
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import httpx
import pytest
import respx

from catalog_client.projection import PromptView

API_BASE_URL = "http://localhost:3001"


@pytest.fixture
def mock_api() -> Generator[respx.MockRouter]:
    """Mock the Prompt Vault API."""
    with respx.mock(base_url=API_BASE_URL) as respx_mock:
        yield respx_mock


@pytest.fixture
async def http_client() -> AsyncGenerator[httpx.AsyncClient]:
    """HTTP client pointed at the mocked API."""
    async with httpx.AsyncClient(base_url=API_BASE_URL) as client:
        yield client


@pytest.fixture
def make_prompt() -> Callable[..., PromptView]:
    """Build a PromptView with sensible defaults."""

    def _make(prompt_id: str, act: str = "", **kwargs: Any) -> PromptView:
        defaults: dict[str, Any] = {
            "act": act or prompt_id,
            "prompt": f"Prompt for {act or prompt_id}",
            "icon": "✨",
            "category": "General",
            "is_vip": prompt_id.startswith("vip-"),
        }
        defaults.update(kwargs)
        return PromptView(id=prompt_id, **defaults)

    return _make
