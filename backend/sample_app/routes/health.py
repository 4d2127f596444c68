"""
Sample App Backend — Health Check Route
=========================================

What:  Liveness endpoint for monitoring and load balancer probes.
Why:   Load balancers and container runtimes need a cheap "is the process up?"
       check. The service has no dependencies to probe, so being able to answer
       is the whole check.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Note:
    Requests to /health are skipped by the request logging middleware because
    probes run every few seconds and would drown out useful log lines.
    For uptime, see GET /api/status.
"""

from fastapi import APIRouter

from sample_app.schemas.api import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(status="OK")
