"""Liveness endpoint."""

from fastapi import APIRouter

from pindrop.schemas.common import HealthResponse

health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report that the API process is up."""
    return HealthResponse()
