"""HTTP client helpers for talking to the Prompt Vault API."""

import os
from typing import Any

import httpx


def get_api_base_url() -> str:
    """Get the API base URL from environment."""
    return os.getenv("VITE_API_URL", "http://localhost:3001")


def get_default_timeout() -> float:
    """Get the default request timeout."""
    return float(os.getenv("CATALOG_API_TIMEOUT", "30.0"))


def create_http_client() -> httpx.AsyncClient:
    """Create an AsyncClient bound to the configured API."""
    return httpx.AsyncClient(base_url=get_api_base_url(), timeout=get_default_timeout())


def _get_headers() -> dict[str, str]:
    """Get common headers for API requests."""
    return {"X-Request-Source": "catalog-client"}


async def api_get(
    client: httpx.AsyncClient,
    path: str,
    params: dict[str, Any] | None = None,
) -> Any:
    """Make a GET request to the API."""
    response = await client.get(path, params=params, headers=_get_headers())
    response.raise_for_status()
    return response.json()


async def api_post(
    client: httpx.AsyncClient,
    path: str,
    json: dict[str, Any] | None = None,
) -> Any:
    """Make a POST request to the API."""
    response = await client.post(path, json=json, headers=_get_headers())
    response.raise_for_status()
    return response.json()


async def api_put(
    client: httpx.AsyncClient,
    path: str,
    json: dict[str, Any],
) -> Any:
    """Make a PUT request to the API."""
    response = await client.put(path, json=json, headers=_get_headers())
    response.raise_for_status()
    return response.json()


async def api_delete(
    client: httpx.AsyncClient,
    path: str,
) -> Any:
    """Make a DELETE request to the API."""
    response = await client.delete(path, headers=_get_headers())
    response.raise_for_status()
    return response.json()
