"""
Tests for the products application layer (use cases).

Use cases run against the in-memory record store. Each test verifies
orchestration: lookups, not-found handling, and what reaches the store.
"""

import asyncio

import pytest

from catalog.application.products.create_product import CreateProductUseCase
from catalog.application.products.delete_product import DeleteProductUseCase
from catalog.application.products.dtos import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductQuery,
    ProductResult,
    ToggleAvailabilityCommand,
    UpdateProductCommand,
)
from catalog.application.products.get_product import GetProductUseCase
from catalog.application.products.list_products import ListProductsUseCase
from catalog.application.products.toggle_availability import ToggleAvailabilityUseCase
from catalog.application.products.update_product import UpdateProductUseCase
from catalog.domain.products.errors import ProductNotFoundError, StoreUnavailableError


class TestListProductsUseCase:
    """Tests for the ListProductsUseCase."""

    def test_orders_by_price_descending(self, repo) -> None:
        for name, price in [("A", 10), ("B", 50), ("C", 30)]:
            repo.seed(name, price)

        results = asyncio.run(ListProductsUseCase(repo).execute())

        assert [r.price for r in results] == [50, 30, 10]

    def test_empty_catalog(self, repo) -> None:
        assert asyncio.run(ListProductsUseCase(repo).execute()) == []

    def test_store_failure_propagates(self, repo) -> None:
        repo.available = False
        with pytest.raises(StoreUnavailableError):
            asyncio.run(ListProductsUseCase(repo).execute())


class TestGetProductUseCase:
    """Tests for the GetProductUseCase."""

    def test_returns_product(self, repo) -> None:
        product = repo.seed("Monitor", 899.0)
        result = asyncio.run(GetProductUseCase(repo).execute(GetProductQuery(product.id)))
        assert result == ProductResult(
            id=product.id, name="Monitor", price=899.0, availability=True
        )

    def test_missing_product_raises_error(self, repo) -> None:
        with pytest.raises(ProductNotFoundError):
            asyncio.run(GetProductUseCase(repo).execute(GetProductQuery(99)))


class TestCreateProductUseCase:
    """Tests for the CreateProductUseCase."""

    def test_creates_available_product(self, repo) -> None:
        command = CreateProductCommand(name="Teclado", price=199.99)
        result = asyncio.run(CreateProductUseCase(repo).execute(command))

        assert result.id == 1
        assert result.availability is True
        assert repo.count() == 1


class TestUpdateProductUseCase:
    """Tests for the UpdateProductUseCase."""

    def test_overwrites_mutable_fields(self, repo) -> None:
        product = repo.seed("Mouse", 49.5)
        command = UpdateProductCommand(
            product_id=product.id, name="Mouse Pro", price=79.0, availability=False
        )

        result = asyncio.run(UpdateProductUseCase(repo).execute(command))

        assert result == ProductResult(
            id=product.id, name="Mouse Pro", price=79.0, availability=False
        )

    def test_missing_product_raises_error(self, repo) -> None:
        command = UpdateProductCommand(
            product_id=5, name="X", price=1.0, availability=True
        )
        with pytest.raises(ProductNotFoundError):
            asyncio.run(UpdateProductUseCase(repo).execute(command))


class TestToggleAvailabilityUseCase:
    """Tests for the ToggleAvailabilityUseCase."""

    def test_flip_is_an_involution(self, repo) -> None:
        product = repo.seed("Webcam", 60.0)
        use_case = ToggleAvailabilityUseCase(repo)
        command = ToggleAvailabilityCommand(product.id)

        first = asyncio.run(use_case.execute(command))
        second = asyncio.run(use_case.execute(command))

        assert first.availability is False
        assert second.availability is True

    def test_missing_product_raises_error(self, repo) -> None:
        with pytest.raises(ProductNotFoundError):
            asyncio.run(
                ToggleAvailabilityUseCase(repo).execute(ToggleAvailabilityCommand(3))
            )


class TestDeleteProductUseCase:
    """Tests for the DeleteProductUseCase."""

    def test_deletes_then_reports_missing(self, repo) -> None:
        product = repo.seed("Hub", 25.0)
        use_case = DeleteProductUseCase(repo)

        asyncio.run(use_case.execute(DeleteProductCommand(product.id)))
        assert repo.count() == 0

        with pytest.raises(ProductNotFoundError):
            asyncio.run(use_case.execute(DeleteProductCommand(product.id)))
