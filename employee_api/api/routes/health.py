"""
Health API endpoint.

Provides:
- /health: heartbeat check
"""
import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from employee_api import config
from employee_api.models import HealthStatus, HealthSummaryResponse

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)

_start_time = time.time()


def get_uptime_seconds() -> int:
    """Get uptime in seconds since the module was loaded."""
    return max(0, int(time.time() - _start_time))


@router.get(
    "/health",
    summary="Heartbeat check.",
    responses={
        200: {"description": "Health summary of the API service."},
    },
)
async def health_summary() -> HealthSummaryResponse:
    """
    Get a summary of the health status of the API service."""
    return HealthSummaryResponse(
        status=HealthStatus.OK,
        checked_at=datetime.now(timezone.utc),
        uptime_seconds=get_uptime_seconds(),
        version=config.APP_VERSION,
    )
