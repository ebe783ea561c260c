"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import ping_database

from ..dependencies import get_db

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(db=Depends(get_db)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Pings MongoDB.
    """
    if await ping_database(db):
        return ReadinessResponse(status="ready", database="connected")
    return ReadinessResponse(status="degraded", database="unavailable")
