"""
Pydantic schemas for contractor payloads and the contractor listing.

ContractorInput is the validated form of the body posted to
POST /recommendations. ContractorRecord mirrors one row returned by the
listing query (contractor columns + risk fields computed by the database).
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RiskFactor(BaseModel):
    """A named reason contributing to a contractor's risk score."""

    factor: str = Field(..., description="Short risk factor label", examples=["Excessive permissions"])
    reason: str = Field(..., description="Why the factor applies", examples=["Has admin on prod"])
    weight: float = Field(
        ...,
        ge=0,
        le=100,
        description="Contribution of the factor to the overall score (0-100)",
        examples=[90],
    )


class ContractorInput(BaseModel):
    """
    Contractor record used to build a recommendation prompt.

    Built by validate_contractor_payload() only after the four required
    fields have been checked for truthiness, so every instance is complete.

    risk_score and risk_factors are kept exactly as received because the
    response echoes them back unmodified.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Contractor full name", examples=["Alice"])
    project_description: str = Field(
        ...,
        min_length=1,
        description="What the contractor was hired to do",
        examples=["Data migration"],
    )
    access_level: str = Field(..., min_length=1, description="Access level, e.g. 'read' or 'admin'", examples=["admin"])
    application: str = Field(..., min_length=1, description="System the contractor accesses", examples=["CRM"])
    has_prod_access: bool = Field(False, description="Whether the contractor can reach production")
    risk_score: Optional[Any] = Field(None, description="Risk score computed by the store, echoed back")
    risk_factors: Optional[Any] = Field(None, description="Ordered risk factors, echoed back")


class ContractorRecord(BaseModel):
    """
    One row of the contractor listing.

    Columns come from the contractors table; risk_score, risk_factors and
    calculation_details come from calculate_contractor_risk_score(id).
    Rows are listed as stored, so no column is type-checked here; a risk
    factor outside the usual RiskFactor shape is returned unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: Any
    name: Optional[Any] = None
    email: Optional[Any] = None
    job_title: Optional[Any] = None
    project_description: Optional[Any] = None
    role: Optional[Any] = None
    application: Optional[Any] = None
    access_level: Optional[Any] = None
    contract_start: Optional[Any] = None
    contract_end: Optional[Any] = None
    last_sign_in: Optional[Any] = None
    updated_at: Optional[Any] = None
    has_prod_access: Optional[Any] = None
    risk_score: Optional[Any] = None
    risk_factors: Optional[Any] = None
    calculation_details: Optional[Any] = None


class ContractorListResponse(BaseModel):
    """Response model for GET /contractors."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    count: int = Field(..., description="Number of contractors returned")
    contractors: List[ContractorRecord]
    generated_at: datetime = Field(..., alias="generatedAt")
