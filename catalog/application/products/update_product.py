"""
Use case: Replace the mutable fields of a product.

Input: UpdateProductCommand (product_id, name, price, availability)
Output: ProductResult
Side effects: Updates one row in the record store.
Failure cases: ProductNotFoundError, StoreUnavailableError.
"""

import logging
from dataclasses import replace

from catalog.application.products.dtos import ProductResult, UpdateProductCommand
from catalog.domain.products.errors import ProductNotFoundError
from catalog.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Orchestrates a full replace of name, price and availability."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, command: UpdateProductCommand) -> ProductResult:
        """Run the update product use case.

        Args:
            command: The product id and its new field values.

        Returns:
            The updated product.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = await self._product_repo.get_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)

        updated = await self._product_repo.update(
            replace(
                product,
                name=command.name,
                price=command.price,
                availability=command.availability,
            )
        )
        # Removed between the lookup and the write.
        if updated is None:
            raise ProductNotFoundError(command.product_id)

        logger.info("Updated product id=%d", updated.id)
        return ProductResult.from_entity(updated)
