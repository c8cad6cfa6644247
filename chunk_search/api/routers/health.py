"""
Health check API endpoints.

Routes: GET /health, GET /health/stores

Dependencies: chunk_search.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from chunk_search.api.deps import ServiceContainer, get_service_container
from chunk_search.api.routers.router_utils import error_response
from chunk_search.core.exceptions import StoreError
from chunk_search.models.common import ErrorResponse


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class StoresHealthResponse(BaseModel):
    """Store connectivity response model."""

    status: str
    vector_records: int
    lexical_rows: int


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/stores", response_model=StoresHealthResponse, responses={503: {"model": ErrorResponse}})
async def health_check_stores(
    container: ServiceContainer = Depends(get_service_container),
):
    """Store health check: both stores must answer a count query."""
    try:
        vector_records = await container.vector_store.count()
        lexical_rows = await container.lexical_store.count()
    except StoreError as e:
        return error_response(e)
    return StoresHealthResponse(
        status="healthy",
        vector_records=vector_records,
        lexical_rows=lexical_rows,
    )
