"""
Extraction of the recommendation array from a Gemini reply.

Gemini is asked for a bare JSON array (prompt + response_mime_type), but the
model may still wrap it in prose or markdown fences. Callers only use
extract_recommendations(); the strategies behind it are tried in order:

1. StrictEnvelopeStrategy - candidates[0].content.parts[0].text, trimmed,
   parsed with json.loads
2. ScanFallbackStrategy   - first "[" through last "]" of the reply text
   (or of the serialized envelope when no text is reachable), then parsed

A stricter provider mode (response_schema) can replace both strategies
without touching callers.
"""

import json
import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel

from contractor_risk.utils.errors import ResponseParseError
from contractor_risk.utils.logging import get_logger

logger = get_logger(__name__)

# Greedy and DOTALL: spans from the first "[" to the last "]" across newlines
JSON_ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)

NO_VALID_RESPONSE = "No valid response from Gemini"
NO_JSON_FOUND = "No JSON found in Gemini response"
INVALID_JSON = "Could not extract valid JSON from response"


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def get_reply_text(envelope: Any) -> Optional[str]:
    """
    Return candidates[0].content.parts[0].text, or None if any step is missing.

    Works on both the google-genai GenerateContentResponse object and the raw
    REST envelope (a dict with the same nesting).
    """
    candidates = _get(envelope, "candidates")
    if not candidates:
        return None
    content = _get(candidates[0], "content")
    if not content:
        return None
    parts = _get(content, "parts")
    if not parts:
        return None
    text = _get(parts[0], "text")
    return text if isinstance(text, str) else None


def serialize_envelope(envelope: Any) -> str:
    """Serialize the full response envelope to JSON text."""
    if isinstance(envelope, BaseModel):
        return envelope.model_dump_json(exclude_none=True)
    return json.dumps(envelope, default=str)


class ExtractionStrategy(ABC):
    """One way of turning a Gemini reply into a list."""

    name: str = "strategy"

    @abstractmethod
    def extract(self, envelope: Any) -> List[Any]:
        """Return the parsed array or raise ResponseParseError."""


class StrictEnvelopeStrategy(ExtractionStrategy):
    """The reply text is expected to be exactly one JSON array."""

    name = "strict_envelope"

    def extract(self, envelope: Any) -> List[Any]:
        text = get_reply_text(envelope)
        if text is None:
            raise ResponseParseError(NO_VALID_RESPONSE)

        try:
            parsed = json.loads(text.strip())
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Reply text is not valid JSON: {e}") from e

        if not isinstance(parsed, list):
            raise ResponseParseError(
                f"Reply JSON is a {type(parsed).__name__}, expected an array"
            )
        return parsed


class ScanFallbackStrategy(ExtractionStrategy):
    """Pull the first array-shaped substring out of a noisy reply."""

    name = "scan_fallback"

    def extract(self, envelope: Any) -> List[Any]:
        text = get_reply_text(envelope)
        haystack = text if text is not None else serialize_envelope(envelope)

        match = JSON_ARRAY_PATTERN.search(haystack)
        if not match:
            raise ResponseParseError(NO_JSON_FOUND)

        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise ResponseParseError(INVALID_JSON) from e

        if not isinstance(parsed, list):
            raise ResponseParseError(INVALID_JSON)
        return parsed


DEFAULT_STRATEGIES: Sequence[ExtractionStrategy] = (
    StrictEnvelopeStrategy(),
    ScanFallbackStrategy(),
)


def extract_recommendations(
    envelope: Any,
    strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES,
) -> List[Any]:
    """
    Extract the recommendation array from a Gemini response envelope.

    Args:
        envelope: GenerateContentResponse or the equivalent raw dict
        strategies: Strategies to try, in order

    Returns:
        The parsed JSON array, unchanged

    Raises:
        ResponseParseError: If every strategy fails (the last error is raised)
    """
    last_error: Optional[ResponseParseError] = None

    for strategy in strategies:
        try:
            result = strategy.extract(envelope)
        except ResponseParseError as e:
            logger.warning(f"Extraction strategy '{strategy.name}' failed: {e}")
            last_error = e
            continue

        logger.debug(f"Extraction strategy '{strategy.name}' succeeded")
        return result

    if last_error is None:
        raise ResponseParseError("No extraction strategies configured")
    raise last_error
