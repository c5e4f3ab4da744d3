"""
Error types raised by the contractor and recommended-actions services.

Every error carries the HTTP status it maps to and a public_message that is
safe to return to clients. The str() of the exception holds the detailed,
server-side message and is only ever logged.
"""

from typing import Optional


INTERNAL_ERROR_MESSAGE = "Internal server error"
MISSING_FIELDS_MESSAGE = "Missing required fields"


class ServiceError(RuntimeError):
    """Base class for failures that end a single request."""

    status_code: int = 500
    public_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class ContractorValidationError(ServiceError):
    """A required contractor field is missing or empty."""

    status_code = 400
    public_message = MISSING_FIELDS_MESSAGE

    def __init__(self, missing_fields: Optional[list] = None):
        self.missing_fields = list(missing_fields or [])
        super().__init__(MISSING_FIELDS_MESSAGE)


class RecommendationConfigError(ServiceError):
    """A required credential is not available in the environment."""


class UpstreamModelError(ServiceError):
    """The Gemini API answered with a non-success status."""

    def __init__(self, upstream_status: Optional[int], upstream_body: str):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(f"API error: {upstream_status}")


class ResponseParseError(ServiceError):
    """The Gemini reply could not be coerced into a JSON array."""


class StoreUnavailableError(ServiceError):
    """The contractor store is not configured for this process."""
