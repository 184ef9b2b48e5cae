"""
FoodHub Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer health checks.
How:   Runs SELECT 1 against the database and reports the aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (still HTTP 200; the body carries the status)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from foodhub import __version__
from foodhub.database import engine
from foodhub.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Service start time for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
