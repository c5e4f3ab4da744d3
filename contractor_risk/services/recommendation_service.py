"""
Recommended Actions Service - Gemini single-shot generation

Asks Gemini for 1-3 remediation recommendations for one high-risk
contractor and returns them as structured data.

Architecture:
- Pattern: Single-shot LLM (one prompt, one response, no retries)
- Model: Gemini 2.5 Flash (settings.GEMINI_MODEL)
- API: Google Gen AI Python SDK (google-genai), async client
- Temperature: 0.1 (literal compliance with the JSON-only instruction)
- Output: response_mime_type='application/json', parsed with a two-tier
  extraction (see agents/recommendation/extraction.py)

Per request: Validated -> PromptBuilt -> AwaitingModel -> Parsed | Failed.
Every failure is terminal for the request; nothing is cached or persisted.
"""

import json
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from contractor_risk.agents.recommendation import (
    build_recommended_actions_prompt,
    extract_recommendations,
    format_risk_factors,
)
from contractor_risk.config import settings
from contractor_risk.schemas.contractors import ContractorInput
from contractor_risk.schemas.recommendations import (
    Recommendation,
    RecommendedActionsResponse,
)
from contractor_risk.utils.errors import (
    RecommendationConfigError,
    UpstreamModelError,
)
from contractor_risk.utils.logging import get_logger

logger = get_logger(__name__)

MIN_RECOMMENDATIONS = 1
MAX_RECOMMENDATIONS = 3


def _get_gemini_client(api_key: str) -> genai.Client:
    """Build a Gemini client for one request."""
    return genai.Client(api_key=api_key)


def _upstream_body(error: genai_errors.APIError) -> str:
    if error.details is not None:
        try:
            return json.dumps(error.details)
        except (TypeError, ValueError):
            return str(error.details)
    return error.message or str(error)


async def call_gemini(prompt: str, api_key: Optional[str] = None) -> Any:
    """
    Send the prompt to Gemini and return the parsed recommendation array.

    Args:
        prompt: Complete prompt text
        api_key: Gemini API key (defaults to settings.GEMINI_API_KEY)

    Returns:
        The JSON array extracted from the reply

    Raises:
        RecommendationConfigError: If no API key is configured (no call is made)
        UpstreamModelError: If Gemini answers with a non-success status
        ResponseParseError: If no JSON array can be extracted from the reply
    """
    logger.info("Generating risk-based recommendations...")

    key = api_key if api_key is not None else settings.GEMINI_API_KEY
    if not key:
        logger.error("GEMINI_API_KEY not found in environment variables")
        raise RecommendationConfigError("API key not configured")

    client = _get_gemini_client(key)

    config = types.GenerateContentConfig(
        temperature=settings.GEMINI_TEMPERATURE,
        max_output_tokens=settings.GEMINI_MAX_OUTPUT_TOKENS,
        response_mime_type="application/json",
    )

    try:
        response = await client.aio.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=prompt,
            config=config,
        )
    except genai_errors.APIError as e:
        body = _upstream_body(e)
        logger.error(f"Gemini API error: status={e.code} body={body}")
        raise UpstreamModelError(e.code, body) from e

    logger.info("Gemini API response received")
    return extract_recommendations(response)


def _to_recommendations(parsed: List[Any]) -> List[Union[Recommendation, Any]]:
    recommendations: List[Union[Recommendation, Any]] = []
    for idx, item in enumerate(parsed):
        if isinstance(item, dict):
            recommendations.append(Recommendation.model_validate(item))
        else:
            logger.warning(
                f"Recommendation {idx} is a {type(item).__name__}, not an object; passing through"
            )
            recommendations.append(item)
    return recommendations


async def generate_recommended_actions(
    contractor: ContractorInput,
    api_key: Optional[str] = None,
) -> RecommendedActionsResponse:
    """
    Generate remediation recommendations for a validated contractor.

    This function:
    1. Formats the contractor's risk factors for the prompt
    2. Builds the prompt
    3. Calls Gemini once
    4. Extracts and wraps the recommendations

    Args:
        contractor: Contractor that passed validate_contractor_payload()
        api_key: Optional Gemini API key override

    Returns:
        RecommendedActionsResponse echoing the contractor's risk score and
        risk factors unmodified
    """
    risk_factors_formatted = format_risk_factors(contractor.risk_factors)
    prompt = build_recommended_actions_prompt(contractor, risk_factors_formatted)
    logger.info(f"Prompt created for contractor '{contractor.name}'")
    logger.debug(f"Prompt: {prompt}")

    parsed = await call_gemini(prompt, api_key=api_key)
    recommendations = _to_recommendations(parsed)

    if not MIN_RECOMMENDATIONS <= len(recommendations) <= MAX_RECOMMENDATIONS:
        logger.warning(
            f"Gemini returned {len(recommendations)} recommendations "
            f"(asked for {MIN_RECOMMENDATIONS}-{MAX_RECOMMENDATIONS}); passing through"
        )

    logger.info(f"Successfully parsed recommendations: {len(recommendations)}")

    # Echo only what the caller sent; an explicit null stays null
    echoed = {
        field: getattr(contractor, field)
        for field in ("risk_score", "risk_factors")
        if field in contractor.model_fields_set
    }

    return RecommendedActionsResponse(
        contractor=contractor.name,
        recommendations=recommendations,
        timestamp=datetime.now(timezone.utc),
        **echoed,
    )
