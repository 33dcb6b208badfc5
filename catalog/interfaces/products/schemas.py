"""
Pydantic schemas for the products API.

Response models define the API contract shown in /docs. The request
body models only document the expected payload; request fields are
checked by the validation pipeline, not by Pydantic.
"""

from pydantic import BaseModel, Field

from catalog.application.products.dtos import ProductResult


class ProductSchema(BaseModel):
    """A catalog product."""

    id: int = Field(..., description="The product ID", examples=[1])
    name: str = Field(
        ..., description="The product name", examples=["Monitor Curvo de 40 pulgadas"]
    )
    price: float = Field(..., description="The product price", examples=[300])
    availability: bool = Field(
        ..., description="The product availability", examples=[True]
    )

    @classmethod
    def from_result(cls, result: ProductResult) -> "ProductSchema":
        return cls(
            id=result.id,
            name=result.name,
            price=result.price,
            availability=result.availability,
        )


class ProductResponse(BaseModel):
    """Envelope for a single product."""

    data: ProductSchema


class ProductListResponse(BaseModel):
    """Envelope for the product list."""

    data: list[ProductSchema]


class MessageResponse(BaseModel):
    """Envelope for a confirmation message."""

    data: str = Field(..., examples=["Producto eliminado"])


class CreateProductRequest(BaseModel):
    """Request body for creating a product."""

    name: str = Field(..., examples=["Monitor Curvo 49 pulgadas"])
    price: float = Field(..., examples=[399])


class UpdateProductRequest(CreateProductRequest):
    """Request body for replacing a product."""

    availability: bool = Field(..., examples=[True])


class ViolationSchema(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Error response for rejected input (HTTP 400)."""

    errors: list[ViolationSchema]


class ErrorResponse(BaseModel):
    """Standard error response for not-found and server errors."""

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str
