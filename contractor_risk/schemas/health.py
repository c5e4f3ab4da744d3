"""
Health check endpoint schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health endpoint.

    Used by load balancers and deployment checks; never touches Gemini or
    the contractor store.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"status": "ok"}})

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
