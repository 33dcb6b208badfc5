"""
Domain entities for the products bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ProductDraft:
    """A validated product that has not been persisted yet."""

    name: str
    price: float
    availability: bool = True


@dataclass(frozen=True)
class Product:
    """A catalog product as stored by the record store.

    Invariant: price > 0 and name is non-empty. Audit timestamps
    kept by the store are not part of the entity.
    """

    id: int
    name: str
    price: float
    availability: bool

    def with_availability_toggled(self) -> "Product":
        """Return a copy with the availability flag flipped."""
        return replace(self, availability=not self.availability)
