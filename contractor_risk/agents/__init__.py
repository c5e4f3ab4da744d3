"""
AI Components for the Contractor Risk backend.

1. Recommended Actions (Single-Shot LLM)
   - Uses Gemini to propose 1-3 remediation steps for a risky contractor
   - NOT an ADK agent - uses the Google Gen AI SDK directly
   - Orchestrated by contractor_risk/services/recommendation_service.py
"""

from contractor_risk.agents.recommendation import (
    build_recommended_actions_prompt,
    extract_recommendations,
    format_risk_factors,
)

__all__ = [
    "build_recommended_actions_prompt",
    "extract_recommendations",
    "format_risk_factors",
]
