"""
Use case: Flip the availability flag of a product.

Input: ToggleAvailabilityCommand (product_id)
Output: ProductResult
Side effects: Updates one row in the record store.
Failure cases: ProductNotFoundError, StoreUnavailableError.
"""

import logging

from catalog.application.products.dtos import ProductResult, ToggleAvailabilityCommand
from catalog.domain.products.errors import ProductNotFoundError
from catalog.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class ToggleAvailabilityUseCase:
    """Orchestrates flipping availability. Applying it twice is a no-op."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, command: ToggleAvailabilityCommand) -> ProductResult:
        """Run the toggle availability use case.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = await self._product_repo.get_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)

        updated = await self._product_repo.update(product.with_availability_toggled())
        if updated is None:
            raise ProductNotFoundError(command.product_id)

        logger.info(
            "Product id=%d availability set to %s", updated.id, updated.availability
        )
        return ProductResult.from_entity(updated)
