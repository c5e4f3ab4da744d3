"""
Recommended Actions - Single-Shot LLM Architecture

Prompt templates and reply extraction for the Gemini-based remediation
recommendations.

Architecture:
- Pattern: Single-shot LLM (one prompt, one response, no tools)
- Model: Gemini 2.5 Flash
- Temperature: 0.1
- Output: JSON array parsed from the reply text (two-tier extraction)

The service layer is in:
- contractor_risk/services/recommendation_service.py
"""

from contractor_risk.agents.recommendation.extraction import (
    ExtractionStrategy,
    ScanFallbackStrategy,
    StrictEnvelopeStrategy,
    extract_recommendations,
)
from contractor_risk.agents.recommendation.prompts import (
    NO_RISK_FACTORS_TEXT,
    build_recommended_actions_prompt,
    format_risk_factors,
)

__all__ = [
    "NO_RISK_FACTORS_TEXT",
    "build_recommended_actions_prompt",
    "format_risk_factors",
    "ExtractionStrategy",
    "StrictEnvelopeStrategy",
    "ScanFallbackStrategy",
    "extract_recommendations",
]
