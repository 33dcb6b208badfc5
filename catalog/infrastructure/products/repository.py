"""
Adapter: Product record store.

Implements the ProductRepository port on top of SQLAlchemy asyncio.
Any failure raised while talking to the store, driver errors and
timeouts included, is translated into StoreUnavailableError.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.domain.products.entities import Product, ProductDraft
from catalog.domain.products.errors import StoreUnavailableError
from catalog.domain.products.ports import ProductRepository
from catalog.infrastructure.products.models import ProductModel

logger = logging.getLogger(__name__)

# Upper bound of the 32-bit integer primary key.
MAX_PRODUCT_ID = 2**31 - 1


def _to_entity(model: ProductModel) -> Product:
    return Product(
        id=model.id,
        name=model.name,
        price=model.price,
        availability=model.availability,
    )


def _is_storable_id(product_id: int) -> bool:
    return 0 < product_id <= MAX_PRODUCT_ID


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        logger.error("Record store call failed", exc_info=True)
        raise StoreUnavailableError(type(exc).__name__) from exc


class SqlAlchemyProductRepository(ProductRepository):
    """Persists catalog products in the products table.

    Each call opens a short-lived session from the shared factory.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_by_price_desc(self) -> list[Product]:
        query = select(ProductModel).order_by(
            ProductModel.price.desc(), ProductModel.id
        )
        with _store_errors():
            async with self._session_factory() as session:
                result = await session.scalars(query)
                return [_to_entity(m) for m in result.all()]

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        if not _is_storable_id(product_id):
            return None
        with _store_errors():
            async with self._session_factory() as session:
                model = await session.get(ProductModel, product_id)
                return _to_entity(model) if model is not None else None

    async def add(self, draft: ProductDraft) -> Product:
        model = ProductModel(
            name=draft.name, price=draft.price, availability=draft.availability
        )
        with _store_errors():
            async with self._session_factory() as session:
                session.add(model)
                await session.commit()
                return _to_entity(model)

    async def update(self, product: Product) -> Optional[Product]:
        if not _is_storable_id(product.id):
            return None
        with _store_errors():
            async with self._session_factory() as session:
                model = await session.get(ProductModel, product.id)
                if model is None:
                    return None
                model.name = product.name
                model.price = product.price
                model.availability = product.availability
                await session.commit()
                return _to_entity(model)

    async def delete(self, product_id: int) -> bool:
        if not _is_storable_id(product_id):
            return False
        with _store_errors():
            async with self._session_factory() as session:
                model = await session.get(ProductModel, product_id)
                if model is None:
                    return False
                await session.delete(model)
                await session.commit()
                return True

    async def ping(self) -> bool:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except Exception as exc:
            logger.warning("Record store ping failed: %s", type(exc).__name__)
            return False
        return True
