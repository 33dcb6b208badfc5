"""
Data Transfer Objects for the products application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from catalog.domain.products.entities import Product


@dataclass(frozen=True)
class GetProductQuery:
    """Input DTO for looking up a single product.

    Attributes:
        product_id: Store-generated product id.
    """

    product_id: int


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product.

    Attributes:
        name: Product name, already validated as non-empty.
        price: Product price, already validated as > 0.
    """

    name: str
    price: float


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for a full replace of a product's mutable fields."""

    product_id: int
    name: str
    price: float
    availability: bool


@dataclass(frozen=True)
class ToggleAvailabilityCommand:
    """Input DTO for flipping a product's availability."""

    product_id: int


@dataclass(frozen=True)
class DeleteProductCommand:
    """Input DTO for removing a product."""

    product_id: int


@dataclass(frozen=True)
class ProductResult:
    """Output DTO for a single product.

    Attributes:
        id: Store-generated product id.
        name: Product name.
        price: Product price.
        availability: Whether the product can be ordered.
    """

    id: int
    name: str
    price: float
    availability: bool

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            availability=product.availability,
        )
