"""
Domain-specific errors for the products bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from collections.abc import Sequence

from catalog.domain.products.validation import Violation


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationFailedError(CatalogDomainError):
    """Raised when one or more request fields break their rules."""

    def __init__(self, violations: Sequence[Violation]) -> None:
        super().__init__(f"Validation failed: {len(violations)} violation(s)")
        self.violations = tuple(violations)


class ProductNotFoundError(CatalogDomainError):
    """Raised when no product exists for a well-formed id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class StoreUnavailableError(CatalogDomainError):
    """Raised when the record store cannot be reached or fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Record store unavailable: {reason}")
        self.reason = reason
