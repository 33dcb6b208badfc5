"""
Use case: Retrieve one product by id.

Input: GetProductQuery (product_id)
Output: ProductResult
Side effects: None (read-only query).
Failure cases: ProductNotFoundError, StoreUnavailableError.
"""

import logging

from catalog.application.products.dtos import GetProductQuery, ProductResult
from catalog.domain.products.errors import ProductNotFoundError
from catalog.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class GetProductUseCase:
    """Orchestrates a single product lookup."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, query: GetProductQuery) -> ProductResult:
        """Run the get product use case.

        Args:
            query: The id of the product to retrieve.

        Returns:
            The stored product.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = await self._product_repo.get_by_id(query.product_id)
        if product is None:
            raise ProductNotFoundError(query.product_id)
        return ProductResult.from_entity(product)
