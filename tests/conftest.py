"""
Pytest configuration for Contractor Risk backend tests.

Sets up test environment and global fixtures.
"""
import os

import pytest
from unittest.mock import AsyncMock, MagicMock

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-api-key")

from google.genai import types  # noqa: E402


def make_gemini_response(text: str) -> types.GenerateContentResponse:
    """Build a Gemini response envelope whose first part carries text."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


@pytest.fixture
def gemini_response():
    """Factory fixture: text -> Gemini response envelope."""
    return make_gemini_response


@pytest.fixture
def alice_payload():
    """Contractor payload used across end-to-end scenarios."""
    return {
        "name": "Alice",
        "project_description": "Data migration",
        "access_level": "admin",
        "application": "CRM",
        "has_prod_access": True,
        "risk_score": 85,
        "risk_factors": [
            {"factor": "Excessive permissions", "reason": "Has admin on prod", "weight": 90}
        ],
    }


@pytest.fixture
def recommendations_json():
    """A well-formed reply body: a bare JSON array of recommendations."""
    return (
        '[{"title": "Remove admin rights", '
        '"description": "Downgrade CRM access from admin to read", '
        '"reason": "Addresses Excessive permissions", "priority": "high"}, '
        '{"title": "Review prod access", '
        '"description": "Require approval for each production session", '
        '"reason": "Limits exposure while the migration runs", "priority": "medium"}]'
    )


@pytest.fixture
def mock_gemini_client(recommendations_json):
    """
    Mock google-genai client whose async generate_content returns a
    well-formed recommendations reply.
    """
    mock_client = MagicMock()
    mock_client.aio.models.generate_content = AsyncMock(
        return_value=make_gemini_response(recommendations_json)
    )
    return mock_client


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client for store queries.
    Returns a MagicMock that simulates Supabase client behavior.
    """
    mock_client = MagicMock()
    return mock_client
