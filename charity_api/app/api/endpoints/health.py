"""
Health check endpoint.

Used by deployment probes and by the frontend to verify that the API
is reachable.  It does not touch storage.
"""

from fastapi import APIRouter

from charity_api.app.schemas.organization import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus(status="OK", message="Local database server is running")
