"""
Use case: Create a product.

Input: CreateProductCommand (name, price)
Output: ProductResult with the generated id
Side effects: Inserts one row into the record store.
Failure cases: StoreUnavailableError.
"""

import logging

from catalog.application.products.dtos import CreateProductCommand, ProductResult
from catalog.domain.products.entities import ProductDraft
from catalog.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Orchestrates creating a new, available product."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, command: CreateProductCommand) -> ProductResult:
        """Run the create product use case.

        New products are always created as available.

        Args:
            command: Validated name and price.

        Returns:
            The persisted product including its generated id.
        """
        draft = ProductDraft(name=command.name, price=command.price)
        product = await self._product_repo.add(draft)
        logger.info("Created product id=%d", product.id)
        return ProductResult.from_entity(product)
