"""
Calculator API — Health Check Route
=====================================

What:  Liveness endpoint for container health checks and load balancer probes.
How:   The service has no external dependencies, so it is healthy whenever
       the process can answer; the response reports version and uptime.
Who:   Called by Docker health checks and monitoring systems.
"""

import time

from fastapi import APIRouter

from calculator_api import __version__
from calculator_api.schemas.calculator import HealthResponse

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
