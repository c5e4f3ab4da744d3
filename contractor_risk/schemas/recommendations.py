"""
Pydantic schemas for the recommended-actions endpoint.

The request body is validated by
contractor_risk.services.contractor_validation (it needs a fixed 400 error
instead of FastAPI's 422), so only response models live here.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Recommendation(BaseModel):
    """
    One model-proposed action to reduce a contractor's risk.

    The model is asked for exactly title/description/reason/priority, but
    nothing forces it to comply, so every key is optional, values of any
    JSON type are accepted and unknown keys are kept. priority is lowercased
    when it is a string; anything else is passed through as-is.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[Any] = Field(None, examples=["Remove production admin rights"])
    description: Optional[Any] = Field(None, examples=["Downgrade CRM access from admin to read"])
    reason: Optional[Any] = Field(None, examples=["Addresses 'Excessive permissions'"])
    priority: Optional[Any] = Field(None, examples=["high", "medium", "low"])
    risk_factors_addressed: Optional[Any] = None

    @field_validator("priority", mode="before")
    @classmethod
    def _lowercase_priority(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class RecommendedActionsResponse(BaseModel):
    """
    Response model for POST /recommendations.

    riskScore and riskFactors are the caller's values, unmodified, and are
    only present when the caller sent them. Entries of recommendations that
    are not JSON objects are passed through as the model returned them.
    """

    model_config = ConfigDict(populate_by_name=True)

    contractor: str = Field(..., description="Contractor name", examples=["Alice"])
    risk_score: Optional[Any] = Field(None, alias="riskScore", examples=[85])
    risk_factors: Optional[Any] = Field(None, alias="riskFactors")
    recommendations: List[Union[Recommendation, Any]]
    timestamp: datetime = Field(..., description="When the recommendations were generated (UTC)")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., examples=["Missing required fields", "Internal server error"])
