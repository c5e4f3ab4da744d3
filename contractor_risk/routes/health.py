"""
Health check route for the Contractor Risk backend.

Public endpoint for load balancers, monitoring and deployment verification.
"""

from fastapi import APIRouter

from contractor_risk.schemas.health import HealthResponse
from contractor_risk.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns a simple status indicator for monitoring and load balancing.",
    status_code=200,
    tags=["system"],
)
async def health_check() -> HealthResponse:
    """Public health check endpoint."""
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
