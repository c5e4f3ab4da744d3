"""
Service layer for the Contractor Risk backend.

Contains business logic orchestration that:
- Validates contractor payloads before any model call
- Builds prompts, calls Gemini and maps replies into Pydantic ResponseModels
- Reads contractors and their database-computed risk fields

Services act as the glue between routes (HTTP layer) and agents/database.
"""

from .contractor_service import get_contractors_with_risk_scores
from .contractor_validation import (
    REQUIRED_FIELDS,
    missing_required_fields,
    validate_contractor_payload,
)
from .recommendation_service import call_gemini, generate_recommended_actions

__all__ = [
    "get_contractors_with_risk_scores",
    "REQUIRED_FIELDS",
    "missing_required_fields",
    "validate_contractor_payload",
    "call_gemini",
    "generate_recommended_actions",
]
