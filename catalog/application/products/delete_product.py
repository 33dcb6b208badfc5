"""
Use case: Delete a product.

Input: DeleteProductCommand (product_id)
Output: None
Side effects: Removes one row from the record store.
Failure cases: ProductNotFoundError, StoreUnavailableError.
"""

import logging

from catalog.application.products.dtos import DeleteProductCommand
from catalog.domain.products.errors import ProductNotFoundError
from catalog.domain.products.ports import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Orchestrates removing a product from the catalog."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def execute(self, command: DeleteProductCommand) -> None:
        """Run the delete product use case.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        deleted = await self._product_repo.delete(command.product_id)
        if not deleted:
            raise ProductNotFoundError(command.product_id)
        logger.info("Deleted product id=%d", command.product_id)
