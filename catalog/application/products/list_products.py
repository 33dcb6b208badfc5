"""
Use case: List every product in the catalog.

Input: none
Output: list[ProductResult], most expensive first
Side effects: None (read-only query).
Failure cases: StoreUnavailableError.
"""

import logging

from catalog.application.products.dtos import ProductResult
from catalog.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """Orchestrates listing the catalog ordered by price descending."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self) -> list[ProductResult]:
        """Run the list products use case.

        Returns:
            Every product, ordered by price descending.
        """
        products = await self._product_repo.list_by_price_desc()
        logger.info("Listed %d products", len(products))
        return [ProductResult.from_entity(p) for p in products]
