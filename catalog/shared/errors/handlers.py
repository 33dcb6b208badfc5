"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses:
- ValidationFailedError -> 400 {"errors": [{"field", "message"}, ...]}
- ProductNotFoundError -> 404 {"error": "Producto no encontrado"}
- StoreUnavailableError and anything unexpected -> 500 generic error
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.domain.products.errors import (
    CatalogDomainError,
    ProductNotFoundError,
    StoreUnavailableError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

NOT_FOUND_MESSAGE = "Producto no encontrado"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _validation_response(exc: ValidationFailedError) -> JSONResponse:
    """Build the 400 response listing every violation in order."""
    errors = [{"field": v.field, "message": v.message} for v in exc.violations]
    return JSONResponse(status_code=HTTP_400, content={"errors": errors})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationFailedError)
    async def handle_validation_failed(
        request: Request, exc: ValidationFailedError
    ) -> JSONResponse:
        """Handle rejected request input."""
        logger.warning(
            "Rejected %s %s: %s",
            request.method,
            request.url.path,
            ", ".join(v.message for v in exc.violations),
        )
        return _validation_response(exc)

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        _request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        """Handle missing product errors."""
        logger.warning("Product not found: %s", exc.product_id)
        return _error_response(HTTP_404, NOT_FOUND_MESSAGE)

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(
        _request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        """Handle record store failures without leaking the cause."""
        logger.error("Record store failure: %s", exc.reason)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
