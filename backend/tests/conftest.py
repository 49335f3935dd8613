"""Pytest fixtures for testing."""
import csv
import json
from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from core.config import Settings
from db.stores import CatalogStores

CuratedWriter = Callable[[list[dict[str, str]]], None]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted at a per-test data directory, ignoring any local .env."""
    return Settings(_env_file=None, DATA_DIR=str(tmp_path / "data"))


@pytest.fixture
def stores(settings: Settings) -> CatalogStores:
    """Catalog stores with every data file initialized to its default."""
    catalog_stores = CatalogStores.from_settings(settings)
    catalog_stores.ensure_data_files()
    return catalog_stores


@pytest.fixture
def write_curated(settings: Settings) -> CuratedWriter:
    """Write curated CSV rows (act/prompt columns) to the data directory."""

    def _write(rows: list[dict[str, str]]) -> None:
        settings.curated_path.parent.mkdir(parents=True, exist_ok=True)
        with settings.curated_path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=["act", "prompt"])
            writer.writeheader()
            writer.writerows(rows)

    return _write


@pytest.fixture
def write_json(settings: Settings) -> Callable[[Path, Any], None]:
    """Write a JSON document to a path."""

    def _write(path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")

    return _write


@pytest.fixture
async def client(stores: CatalogStores) -> AsyncGenerator[AsyncClient]:
    """Create a test client with the store dependency pointed at the test data directory."""
    from api.main import app
    from db.session import get_catalog_stores

    app.dependency_overrides[get_catalog_stores] = lambda: stores

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
