"""
Health Check Routes - Liveness endpoint for load balancers and uptime checks.

The check does not touch any provider; it only confirms the API process
is up and responsive.
"""
from fastapi import APIRouter

from pomorise.core.logging_config import get_logger
from pomorise.models.api import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Perform a basic health check."""
    logger.debug("Health check requested")
    return HealthResponse(status="Good")
