"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from api.dependencies.store import DocumentStore
from core.config import settings

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


class StoreHealthResponse(HealthResponse):
    """Health check response including document store counters."""

    profiles: int
    projects: int
    uploads: int


@router.get(
    "/health/detailed",
    response_model=StoreHealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(store: DocumentStore) -> StoreHealthResponse:
    """Health check that also reports how many documents the store holds."""
    stats = store.stats()
    return StoreHealthResponse(
        status="healthy",
        version="1.0.0",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        profiles=stats["profiles"],
        projects=stats["projects"],
        uploads=stats["uploads"],
    )
