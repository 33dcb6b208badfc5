"""
Shared fixtures for the catalog test suite.

Provides an in-memory record store that stands in for the SQLAlchemy
adapter, explicit test settings, and a TestClient that sends the
allowed Origin header on every request.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from catalog.core.config import Settings
from catalog.domain.products.entities import Product, ProductDraft
from catalog.domain.products.errors import StoreUnavailableError
from catalog.domain.products.ports import ProductRepository
from catalog.interfaces.products.dependencies import get_product_repository
from catalog.main import create_app

ALLOWED_ORIGIN = "http://localhost:5173"


class InMemoryProductRepository(ProductRepository):
    """Dict-backed record store. Set ``available = False`` to simulate an outage."""

    def __init__(self) -> None:
        self._rows: dict[int, Product] = {}
        self._next_id = 1
        self.available = True

    def _check(self) -> None:
        if not self.available:
            raise StoreUnavailableError("connection refused")

    def seed(self, name: str, price: float, availability: bool = True) -> Product:
        product = Product(
            id=self._next_id, name=name, price=price, availability=availability
        )
        self._rows[product.id] = product
        self._next_id += 1
        return product

    def count(self) -> int:
        return len(self._rows)

    async def list_by_price_desc(self) -> list[Product]:
        self._check()
        return sorted(self._rows.values(), key=lambda p: (-p.price, p.id))

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        self._check()
        return self._rows.get(product_id)

    async def add(self, draft: ProductDraft) -> Product:
        self._check()
        return self.seed(draft.name, draft.price, draft.availability)

    async def update(self, product: Product) -> Optional[Product]:
        self._check()
        if product.id not in self._rows:
            return None
        self._rows[product.id] = product
        return product

    async def delete(self, product_id: int) -> bool:
        self._check()
        return self._rows.pop(product_id, None) is not None

    async def ping(self) -> bool:
        return self.available


def make_settings(database_url: str, **overrides) -> Settings:
    """Build isolated settings that ignore any local .env file."""
    values = {
        "database_url": database_url,
        "frontend_url": ALLOWED_ORIGIN,
        "rate_limit_enabled": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture
def settings(sqlite_url) -> Settings:
    return make_settings(sqlite_url)


@pytest.fixture
def repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def app(settings, repo):
    """Application wired to the in-memory record store."""
    application = create_app(settings)
    application.dependency_overrides[get_product_repository] = lambda: repo
    return application


@pytest.fixture
def client(app):
    with TestClient(app, headers={"Origin": ALLOWED_ORIGIN}) as test_client:
        yield test_client
