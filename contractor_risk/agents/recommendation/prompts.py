"""
Recommended-Actions Prompt Templates

Builds the single user prompt sent to Gemini when a reviewer asks for
remediation steps for a high-risk contractor.

Architecture:
- Pattern: Single-shot LLM (one prompt, one response, no tools)
- Model: Gemini 2.5 Flash
- Temperature: 0.1 (literal compliance with the JSON-only instruction)
- Output: JSON array requested in the prompt and via response_mime_type;
  compliance is best-effort, see extraction.py
"""

from datetime import datetime
from typing import Any, Optional

from contractor_risk.schemas.contractors import ContractorInput

NO_RISK_FACTORS_TEXT = "No specific risk factors identified."


def _field(item: Any, key: str) -> Any:
    if isinstance(item, dict):
        return item.get(key, "")
    return getattr(item, key, "")


def _display(value: Any) -> str:
    # Whole-number weights render without a trailing ".0" (90, not 90.0)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_risk_factors(risk_factors: Any) -> str:
    """
    Render risk factors as one prompt line per factor.

    Each line reads "- <factor> - <reason> - (Weight: <weight>/100)" and the
    input order is preserved. Anything that is not a non-empty list yields
    NO_RISK_FACTORS_TEXT.

    Args:
        risk_factors: Raw risk_factors value from the contractor payload

    Returns:
        str: Newline-joined risk factor lines
    """
    if not risk_factors or not isinstance(risk_factors, list):
        return NO_RISK_FACTORS_TEXT

    return "\n".join(
        f"- {_display(_field(f, 'factor'))} - {_display(_field(f, 'reason'))}"
        f" - (Weight: {_display(_field(f, 'weight'))}/100)"
        for f in risk_factors
    )


def build_recommended_actions_prompt(
    contractor: ContractorInput,
    risk_factors_formatted: str,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the recommended-actions prompt for one contractor.

    The timestamp only gives the model temporal context (e.g. for contract
    end dates); nothing downstream parses it.

    Args:
        contractor: Validated contractor record
        risk_factors_formatted: Output of format_risk_factors()
        now: Timestamp to embed (defaults to the current local time)

    Returns:
        str: Prompt ready to be sent to Gemini
    """
    today = (now or datetime.now()).strftime("%m/%d/%Y, %I:%M:%S %p")
    prod_access = "Yes" if contractor.has_prod_access else "No"

    return f"""
Create 1-3 security recommendations for a contractor. Today is {today}.

Contractor: {contractor.name}
Application: {contractor.application}
Access Level: {contractor.access_level}
Project Description: {contractor.project_description}
Production Access: {prod_access}
Risk Factors: {risk_factors_formatted}

Generate recommendations in this exact JSON format:
[
  {{
    "title": "Short action title",
    "description": "Specific action to implement",
    "reason": "How this addresses the risk factors",
    "priority": "high"
  }}
]

Use only "high", "medium" or "low" (lowercase) for priority.

Return ONLY the JSON array with no other text."""
