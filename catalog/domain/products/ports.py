"""
Port interfaces (ABCs) for the products bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.domain.products.entities import Product, ProductDraft


class ProductRepository(ABC):
    """Port for the record store holding catalog products.

    Every method may raise StoreUnavailableError when the
    underlying store fails.
    """

    @abstractmethod
    async def list_by_price_desc(self) -> list[Product]:
        """Return every product, most expensive first (ties by id)."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return a product by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, draft: ProductDraft) -> Product:
        """Persist a new product and return it with its generated id."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, product: Product) -> Optional[Product]:
        """Overwrite the mutable fields of an existing product.

        Returns:
            The stored product, or None if the id no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """Remove a product. Returns False if it did not exist."""
        raise NotImplementedError

    @abstractmethod
    async def ping(self) -> bool:
        """Return True when the store answers a trivial query."""
        raise NotImplementedError
