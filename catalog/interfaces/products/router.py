"""
FastAPI router for the products bounded context.

Each route binds an ordered tuple of validation rules, run by the
validated_fields dependency before the endpoint body, to a use case.
All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from catalog.application.products.create_product import CreateProductUseCase
from catalog.application.products.delete_product import DeleteProductUseCase
from catalog.application.products.dtos import (
    CreateProductCommand,
    DeleteProductCommand,
    GetProductQuery,
    ToggleAvailabilityCommand,
    UpdateProductCommand,
)
from catalog.application.products.get_product import GetProductUseCase
from catalog.application.products.list_products import ListProductsUseCase
from catalog.application.products.toggle_availability import ToggleAvailabilityUseCase
from catalog.application.products.update_product import UpdateProductUseCase
from catalog.domain.products import rules
from catalog.domain.products.rules import parse_int, parse_number
from catalog.interfaces.products.dependencies import (
    RawFields,
    get_create_product_use_case,
    get_delete_product_use_case,
    get_get_product_use_case,
    get_list_products_use_case,
    get_toggle_availability_use_case,
    get_update_product_use_case,
    validated_fields,
)
from catalog.interfaces.products.schemas import (
    CreateProductRequest,
    ErrorResponse,
    MessageResponse,
    ProductListResponse,
    ProductResponse,
    ProductSchema,
    UpdateProductRequest,
    ValidationErrorResponse,
)

DELETED_MESSAGE = "Producto eliminado"

# ------------------------------------------------------------------
# Route table: validation rules per route
# ------------------------------------------------------------------

ID_RULES = (("id", rules.integer),)

PRODUCT_BODY_RULES = (
    ("name", rules.not_empty),
    ("price", rules.required),
    ("price", rules.numeric),
    ("price", rules.positive),
)

GET_PRODUCT_RULES = ID_RULES
CREATE_PRODUCT_RULES = PRODUCT_BODY_RULES
UPDATE_PRODUCT_RULES = (
    ID_RULES + PRODUCT_BODY_RULES + (("availability", rules.boolean),)
)
TOGGLE_AVAILABILITY_RULES = ID_RULES
DELETE_PRODUCT_RULES = ID_RULES

# ------------------------------------------------------------------
# OpenAPI annotations for fields read from the raw request
# ------------------------------------------------------------------

ID_PARAMETER = {
    "in": "path",
    "name": "id",
    "required": True,
    "description": "The ID of the product",
    "schema": {"type": "integer"},
}

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Invalid input"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}


def _openapi(*, with_id: bool = False, body: Any = None) -> dict[str, Any]:
    extra: dict[str, Any] = {}
    if with_id:
        extra["parameters"] = [ID_PARAMETER]
    if body is not None:
        extra["requestBody"] = {
            "required": True,
            "content": {"application/json": {"schema": body.model_json_schema()}},
        }
    return extra


router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
    description="Return every product, ordered by price descending.",
)
async def list_products(
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> ProductListResponse:
    results = await use_case.execute()
    return ProductListResponse(data=[ProductSchema.from_result(r) for r in results])


@router.get(
    "/{id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a product by ID",
    description="Return a product based on its unique ID.",
    openapi_extra=_openapi(with_id=True),
)
async def get_product(
    fields: RawFields = Depends(validated_fields(GET_PRODUCT_RULES)),
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
) -> ProductResponse:
    result = await use_case.execute(GetProductQuery(product_id=parse_int(fields["id"])))
    return ProductResponse(data=ProductSchema.from_result(result))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a new product",
    description="Store a new, available product and return it with its ID.",
    openapi_extra=_openapi(body=CreateProductRequest),
)
async def create_product(
    fields: RawFields = Depends(
        validated_fields(CREATE_PRODUCT_RULES, reads_body=True)
    ),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> ProductResponse:
    command = CreateProductCommand(
        name=fields["name"],
        price=parse_number(fields["price"]),
    )
    result = await use_case.execute(command)
    return ProductResponse(data=ProductSchema.from_result(result))


@router.put(
    "/{id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a product",
    description="Replace name, price and availability of a product.",
    openapi_extra=_openapi(with_id=True, body=UpdateProductRequest),
)
async def update_product(
    fields: RawFields = Depends(
        validated_fields(UPDATE_PRODUCT_RULES, reads_body=True)
    ),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
) -> ProductResponse:
    command = UpdateProductCommand(
        product_id=parse_int(fields["id"]),
        name=fields["name"],
        price=parse_number(fields["price"]),
        availability=fields["availability"],
    )
    result = await use_case.execute(command)
    return ProductResponse(data=ProductSchema.from_result(result))


@router.patch(
    "/{id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Toggle product availability",
    description="Flip the availability flag and return the updated product.",
    openapi_extra=_openapi(with_id=True),
)
async def toggle_availability(
    fields: RawFields = Depends(validated_fields(TOGGLE_AVAILABILITY_RULES)),
    use_case: ToggleAvailabilityUseCase = Depends(get_toggle_availability_use_case),
) -> ProductResponse:
    command = ToggleAvailabilityCommand(product_id=parse_int(fields["id"]))
    result = await use_case.execute(command)
    return ProductResponse(data=ProductSchema.from_result(result))


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a product by ID",
    description="Remove a product and return a confirmation message.",
    openapi_extra=_openapi(with_id=True),
)
async def delete_product(
    fields: RawFields = Depends(validated_fields(DELETE_PRODUCT_RULES)),
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> MessageResponse:
    await use_case.execute(DeleteProductCommand(product_id=parse_int(fields["id"])))
    return MessageResponse(data=DELETED_MESSAGE)
