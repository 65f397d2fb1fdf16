"""Shared test fixtures.

Provides an async HTTP client backed by the FastAPI app and a catalog
repository over the bundled JSON data.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from garden_forecast.config import settings
from garden_forecast.core.rate_limiter import get_rate_limiter
from garden_forecast.main import app
from garden_forecast.services.catalog import CatalogRepository
from garden_forecast.services.forecast_service import ForecastService


# ---------------------------------------------------------------------------
# Async HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Yield an ``httpx.AsyncClient`` wired to the FastAPI app."""
    transport = ASGITransport(app=app)  # type: ignore[arg-type]
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_rate_limiter() -> None:
    """Start every test with an empty request-limiter state."""
    get_rate_limiter().reset()


# ---------------------------------------------------------------------------
# Catalog / services
# ---------------------------------------------------------------------------


@pytest.fixture()
def catalog() -> CatalogRepository:
    """Catalog repository reading the bundled data files."""
    return CatalogRepository(settings.DATA_DIR)


@pytest.fixture()
def forecast_service(catalog: CatalogRepository) -> ForecastService:
    return ForecastService(catalog)

