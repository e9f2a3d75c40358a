"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import Settings, get_settings
from shared.exceptions import UpstreamFailure

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running. Does not touch the store.
    """
    return HealthResponse(status="OK", environment=settings.environment)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Probes the store with one query. Answers 503 when it is unreachable or
    not configured.
    """
    try:
        container.users.ping()
    except (UpstreamFailure, RuntimeError) as e:
        logger.warning("Readiness probe failed: %s", e)
        response.status_code = 503
        return ReadinessResponse(status="unavailable", database="unreachable")

    return ReadinessResponse(status="ready", database="connected")
