"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings, get_settings
from modules.auth.models import SessionState
from ..dependencies import ServiceContainer, get_container

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    session: SessionState
    notifications: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(container: ServiceContainer = Depends(get_container)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Ready once the persisted session has been applied, signed in or not.
    """
    session = container.session
    feed = container.feed
    return ReadinessResponse(
        status="starting" if session.loading else "ready",
        session=session.state,
        notifications="loading" if feed.loading else ("live" if feed.user_id else "idle"),
    )
