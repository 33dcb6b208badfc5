"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and record store reachability.
The endpoint answers even when the store is down.
"""

from fastapi import APIRouter, Depends, Request

from catalog.domain.products.ports import ProductRepository
from catalog.interfaces.products.dependencies import get_product_repository
from catalog.interfaces.products.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and database status.",
)
async def health_check(
    request: Request,
    repo: ProductRepository = Depends(get_product_repository),
) -> HealthResponse:
    """Return current application health status."""
    database = "up" if await repo.ping() else "down"
    return HealthResponse(
        status="ok", version=request.app.state.settings.version, database=database
    )
