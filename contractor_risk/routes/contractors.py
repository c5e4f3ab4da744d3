"""
FastAPI route for the contractor listing.

Endpoints:
- GET /contractors: All contractors with database-computed risk scores
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from supabase import Client

from contractor_risk.db.client import get_store_client
from contractor_risk.schemas.contractors import ContractorListResponse
from contractor_risk.schemas.recommendations import ErrorResponse
from contractor_risk.services.contractor_service import get_contractors_with_risk_scores
from contractor_risk.utils.errors import INTERNAL_ERROR_MESSAGE
from contractor_risk.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/contractors",
    tags=["contractors"]
)


@router.get(
    "",
    response_model=ContractorListResponse,
    status_code=status.HTTP_200_OK,
    summary="List contractors with risk scores",
    responses={500: {"model": ErrorResponse, "description": "Internal server error"}},
    description=(
        "Returns every contractor with risk_score, risk_factors and "
        "calculation_details computed by the database."
    ),
)
async def list_contractors(
    store_client: Client = Depends(get_store_client),
) -> ContractorListResponse:
    """List contractors; query failures are logged and reported as a generic 500."""
    logger.info("GET /contractors called")

    try:
        contractors = await get_contractors_with_risk_scores(store_client)
        return ContractorListResponse(
            success=True,
            count=len(contractors),
            contractors=contractors,
            generated_at=datetime.now(timezone.utc),
        )
    except Exception as e:
        logger.exception(f"Database query error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE
        )
