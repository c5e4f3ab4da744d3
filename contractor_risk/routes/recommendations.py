"""
FastAPI route for recommended remediation actions.

Endpoints:
- POST /recommendations: Generate 1-3 recommendations for one contractor
"""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from contractor_risk.schemas.recommendations import (
    ErrorResponse,
    RecommendedActionsResponse,
)
from contractor_risk.services.contractor_validation import validate_contractor_payload
from contractor_risk.services.recommendation_service import generate_recommended_actions
from contractor_risk.utils.errors import INTERNAL_ERROR_MESSAGE, ServiceError
from contractor_risk.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    prefix="/recommendations",
    tags=["recommendations"]
)


@router.post(
    "",
    response_model=RecommendedActionsResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_200_OK,
    summary="Generate recommended actions for a contractor",
    responses={
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    description="""
    Asks Gemini for 1-3 remediation recommendations for a high-risk contractor.

    **Body:** one contractor, either a full row from GET /contractors or a
    minimal payload. `name`, `project_description`, `access_level` and
    `application` are required; `has_prod_access`, `risk_score` and
    `risk_factors` are optional.

    **Behavior:**
    - Missing required fields -> 400 before any model call
    - `riskScore` and `riskFactors` are echoed back unmodified
    - Recommendations are not cached or persisted
    """
)
async def generate_recommended_actions_endpoint(
    payload: Any = Body(None),
) -> RecommendedActionsResponse:
    """
    Recommended-actions endpoint.

    - Parse/Validate: validate_contractor_payload (400 on missing fields)
    - Call LLM: single Gemini call via service layer
    - Map output: service layer returns RecommendedActionsResponse
    - Errors: ServiceError subclasses are mapped by the app's exception
      handler; anything else becomes a generic 500
    """
    contractor = validate_contractor_payload(payload)
    logger.info(f"POST /recommendations called for contractor '{contractor.name}'")

    try:
        response = await generate_recommended_actions(contractor)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception(f"Error generating recommended actions: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_MESSAGE
        )

    logger.info(f"Returning {len(response.recommendations)} recommendations")
    return response
