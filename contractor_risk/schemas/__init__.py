"""
Pydantic schemas for the Contractor Risk backend.

These models define the request/response contracts for all endpoints.
"""

from .contractors import (
    ContractorInput,
    ContractorListResponse,
    ContractorRecord,
    RiskFactor,
)
from .health import HealthResponse
from .recommendations import (
    ErrorResponse,
    Recommendation,
    RecommendedActionsResponse,
)

__all__ = [
    "ContractorInput",
    "ContractorListResponse",
    "ContractorRecord",
    "RiskFactor",
    "HealthResponse",
    "ErrorResponse",
    "Recommendation",
    "RecommendedActionsResponse",
]
