"""
Request validation for POST /recommendations.

The body may be a full row from GET /contractors or a minimal ad-hoc
payload. Only the fields needed for a meaningful prompt are required, and
they are checked before any call to Gemini is made.
"""

import logging
from typing import Any, Dict, List

from contractor_risk.schemas.contractors import ContractorInput
from contractor_risk.utils.errors import ContractorValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "project_description", "access_level", "application")


def missing_required_fields(payload: Any) -> List[str]:
    """Return the required fields that are absent or falsy in payload."""
    if not isinstance(payload, dict):
        return list(REQUIRED_FIELDS)
    return [field for field in REQUIRED_FIELDS if not payload.get(field)]


def validate_contractor_payload(payload: Any) -> ContractorInput:
    """
    Validate a deserialized contractor payload.

    All of name, project_description, access_level and application must be
    truthy; there is no partial mode.

    Args:
        payload: Request body as parsed from JSON

    Returns:
        ContractorInput built from the payload

    Raises:
        ContractorValidationError: If any required field is missing
    """
    missing = missing_required_fields(payload)
    if missing:
        logger.info(f"Rejecting contractor payload, missing fields: {missing}")
        raise ContractorValidationError(missing)

    data: Dict[str, Any] = {
        "name": str(payload["name"]),
        "project_description": str(payload["project_description"]),
        "access_level": str(payload["access_level"]),
        "application": str(payload["application"]),
        "has_prod_access": bool(payload.get("has_prod_access")),
    }
    # Absent and null are kept apart so the response can echo exactly what was sent
    for field in ("risk_score", "risk_factors"):
        if field in payload:
            data[field] = payload[field]
    return ContractorInput(**data)
