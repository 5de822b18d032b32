"""
ScholarHub Backend — Liveness & Health Routes
===============================================

What:  GET / answers a fixed text for uptime probes; GET /health reports
       database connectivity for monitoring.
Who:   Load balancers, Docker health checks, humans with curl.

Status levels:
    - healthy:   Database answered SELECT 1 (HTTP 200)
    - unhealthy: Database unreachable (HTTP 200, status flag for monitoring)

Stripe is not probed: a live call would need a real request against the
processor's API.
"""

import logging
import time

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from app import __version__
from app.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Liveness probe")
async def root() -> str:
    return "Server is running"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """Probe the database with SELECT 1 and report uptime."""
    database = request.app.state.database
    if await database.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
