"""
Health check endpoint.

Lightweight probe for load balancers and uptime monitors. Also reports the
request-logging style actually in effect.
"""

import time
from typing import Any

from fastapi import APIRouter, Request

from stylelog.config import Settings

router = APIRouter(tags=["Health"])

# Record server start time for uptime calculation
_start_time = time.time()


@router.get(
    "/health",
    summary="Health Check",
    description="Returns the current health status of the service.",
    response_model=dict[str, Any],
)
async def health_check(request: Request) -> dict[str, Any]:
    """Return service health, version, environment, uptime and log style."""
    # The settings the app was built with, not the cached env defaults
    settings: Settings = request.app.state.settings
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "uptime_seconds": round(time.time() - _start_time, 2),
        "log_style": request.app.state.log_style,
    }
