"""Pytest configuration and fixtures for the custom quote service."""

import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config import CatalogConfig, get_catalog_config
from src.models.catalog import CatalogProductCreate, CreatedProduct
from src.services.clients.catalog_client import CatalogClient, get_catalog_client
from src.services.errors import UpstreamError


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


class StubCatalog(CatalogClient):
    """In-memory catalog that records calls instead of hitting Ecwid."""

    def __init__(self) -> None:
        self.created: list[CatalogProductCreate] = []
        self.deleted: list[str] = []
        self.failing_ids: set[str] = set()
        self.create_error: Exception | None = None
        self.next_id = 1001

    async def create_product(self, product: CatalogProductCreate) -> CreatedProduct:
        await asyncio.sleep(0)
        if self.create_error is not None:
            raise self.create_error
        self.created.append(product)
        return CreatedProduct(id=self.next_id)

    async def delete_product(self, product_id: str) -> None:
        await asyncio.sleep(0)
        if product_id in self.failing_ids:
            raise UpstreamError("Delete", 404, '{"errorMessage":"Product not found"}')
        self.deleted.append(product_id)


@pytest.fixture()
def catalog_config():
    """Fully configured credentials without a webhook secret."""
    return CatalogConfig(store_id="1234567", token="secret_token")


@pytest.fixture(autouse=True)
def config_override(catalog_config):
    from src.main import app

    state = {"config": catalog_config}
    app.dependency_overrides[get_catalog_config] = lambda: state["config"]
    yield state
    app.dependency_overrides.pop(get_catalog_config, None)


@pytest.fixture(autouse=True)
def catalog_stub():
    """Provide a stub catalog so tests do not call external services."""
    from src.main import app

    stub = StubCatalog()
    app.dependency_overrides[get_catalog_client] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_catalog_client, None)


@pytest_asyncio.fixture()
async def client():
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
