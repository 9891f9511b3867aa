"""
Health check endpoints
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
import time

from src.feedback_analyzer import format_timestamp

from ..config import Settings
from ..dependencies import get_settings
from ..models.requests import HealthResponse, ReadinessResponse

router = APIRouter()

# Track startup time
_startup_time = time.time()

ENDPOINTS = ["/api/analyze", "/api/analyze-bulk", "/api/health"]


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.
    Returns service status, current time and the API endpoints.
    """
    return HealthResponse(
        status="Server is running!",
        timestamp=format_timestamp(datetime.now(timezone.utc)),
        endpoints=ENDPOINTS,
        version="1.0.0",
        uptime_seconds=round(time.time() - _startup_time, 2)
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness check for container orchestration.
    Verifies the API key is configured and the UI directory exists.
    """
    checks = {
        "api_key": bool(settings.CLAUDE_API_KEY),
        "static_dir": settings.static_path.exists()
    }

    return ReadinessResponse(ready=all(checks.values()), checks=checks)


@router.get("/health/live")
async def liveness_check():
    """
    Liveness check - simple ping to verify service is running.
    """
    return {"alive": True}
