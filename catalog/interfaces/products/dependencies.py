"""
Dependency injection for the products bounded context.

Provides FastAPI dependency functions that wire the record store
into use cases, and the dependency that runs the validation pipeline
against the raw request before the endpoint is dispatched.
"""

import json
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from fastapi import Depends, Request

from catalog.application.products.create_product import CreateProductUseCase
from catalog.application.products.delete_product import DeleteProductUseCase
from catalog.application.products.get_product import GetProductUseCase
from catalog.application.products.list_products import ListProductsUseCase
from catalog.application.products.toggle_availability import ToggleAvailabilityUseCase
from catalog.application.products.update_product import UpdateProductUseCase
from catalog.domain.products.errors import ValidationFailedError
from catalog.domain.products.ports import ProductRepository
from catalog.domain.products.validation import RuleBinding, Violation, validate

RawFields = dict[str, Any]


def get_product_repository(request: Request) -> ProductRepository:
    """Return the process-wide record store built by the app factory."""
    return request.app.state.product_repository


def get_list_products_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    return ListProductsUseCase(product_repo=repo)


def get_get_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    return GetProductUseCase(product_repo=repo)


def get_create_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(product_repo=repo)


def get_update_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(product_repo=repo)


def get_toggle_availability_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> ToggleAvailabilityUseCase:
    return ToggleAvailabilityUseCase(product_repo=repo)


def get_delete_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(product_repo=repo)


async def _read_json_object(request: Request) -> RawFields:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise ValidationFailedError([Violation("body", "invalid JSON body")]) from None
    if not isinstance(payload, dict):
        raise ValidationFailedError([Violation("body", "body must be a JSON object")])
    return payload


def validated_fields(
    rules: Sequence[RuleBinding], *, reads_body: bool = False
) -> Callable[[Request], Awaitable[RawFields]]:
    """Build a dependency that validates a route's raw fields.

    Path parameters take precedence over body fields of the same name.

    Args:
        rules: Ordered (field, rule) bindings for the route.
        reads_body: Whether the route accepts a JSON body.

    Returns:
        A dependency returning the raw fields once every rule passed.
        It raises ValidationFailedError with all violations otherwise.
    """

    async def dependency(request: Request) -> RawFields:
        fields = await _read_json_object(request) if reads_body else {}
        fields.update(request.path_params)
        result = validate(fields, rules)
        if not result.is_valid:
            raise ValidationFailedError(result.violations)
        return fields

    return dependency
