"""
Tests for extracting the recommendation array from Gemini replies.

Covers:
- Strict parsing of a bare JSON array
- Fallback scan of prose/markdown-wrapped replies
- Failure modes (no array, broken array, empty envelope)
- Raw dict envelopes as well as SDK response objects
"""

import json

import pytest
from google.genai import types

from contractor_risk.agents.recommendation.extraction import (
    INVALID_JSON,
    NO_JSON_FOUND,
    ScanFallbackStrategy,
    StrictEnvelopeStrategy,
    extract_recommendations,
    get_reply_text,
)
from contractor_risk.utils.errors import ResponseParseError


SAMPLE = [
    {
        "title": "Rotate credentials",
        "description": "Rotate the contractor's CRM API token",
        "reason": "Token predates the contract extension",
        "priority": "high",
    }
]


# =============================================================================
# STRICT TIER
# =============================================================================

class TestStrictEnvelope:
    """Reply text is a bare JSON array."""

    def test_bare_array_returned_unchanged(self, gemini_response):
        """A well-formed array comes back exactly as sent."""
        envelope = gemini_response(json.dumps(SAMPLE))
        assert extract_recommendations(envelope) == SAMPLE

    def test_surrounding_whitespace_trimmed(self, gemini_response):
        """Leading/trailing whitespace does not break strict parsing."""
        envelope = gemini_response("\n\n   " + json.dumps(SAMPLE) + "  \n")
        assert StrictEnvelopeStrategy().extract(envelope) == SAMPLE

    def test_object_reply_rejected_by_strict_tier(self, gemini_response):
        """A JSON object is not a recommendation list."""
        envelope = gemini_response(json.dumps({"recommendations": SAMPLE}))
        with pytest.raises(ResponseParseError):
            StrictEnvelopeStrategy().extract(envelope)

    def test_object_reply_recovered_by_fallback(self, gemini_response):
        """The array nested in an object is still found by the scan."""
        envelope = gemini_response(json.dumps({"recommendations": SAMPLE}))
        assert extract_recommendations(envelope) == SAMPLE

    def test_empty_array(self, gemini_response):
        """An empty array is valid JSON and passes through."""
        assert extract_recommendations(gemini_response("[]")) == []


# =============================================================================
# FALLBACK TIER
# =============================================================================

class TestScanFallback:
    """Reply text wraps the array in commentary."""

    def test_markdown_fenced_reply(self, gemini_response):
        """Prose plus a ```json fence still yields the embedded array."""
        text = "Sure! ```json " + json.dumps(SAMPLE) + " ``` hope that helps"
        assert extract_recommendations(gemini_response(text)) == SAMPLE

    def test_multiline_array(self, gemini_response):
        """The scan spans newlines."""
        text = "Here you go:\n" + json.dumps(SAMPLE, indent=2) + "\nLet me know!"
        assert extract_recommendations(gemini_response(text)) == SAMPLE

    def test_no_array_raises_no_json_found(self, gemini_response):
        """A reply with no array-shaped substring fails with NO_JSON_FOUND."""
        envelope = gemini_response("I cannot help with that request.")

        with pytest.raises(ResponseParseError) as exc_info:
            extract_recommendations(envelope)

        assert str(exc_info.value) == NO_JSON_FOUND
        assert exc_info.value.status_code == 500

    def test_broken_array_raises_invalid_json(self, gemini_response):
        """An array-shaped substring that does not parse fails with INVALID_JSON."""
        envelope = gemini_response('Result: [{"title": "Rotate", priority: high}]')

        with pytest.raises(ResponseParseError) as exc_info:
            extract_recommendations(envelope)

        assert str(exc_info.value) == INVALID_JSON

    def test_scans_serialized_envelope_without_text(self):
        """With no reachable text, the serialized envelope is scanned."""
        envelope = {"notes": SAMPLE}
        assert ScanFallbackStrategy().extract(envelope) == SAMPLE


# =============================================================================
# ENVELOPE NAVIGATION
# =============================================================================

class TestEnvelopeNavigation:
    """get_reply_text over SDK objects and raw dicts."""

    def test_sdk_response(self, gemini_response):
        assert get_reply_text(gemini_response("[1]")) == "[1]"

    def test_raw_dict_envelope(self):
        envelope = {"candidates": [{"content": {"parts": [{"text": "[1, 2]"}]}}]}
        assert get_reply_text(envelope) == "[1, 2]"
        assert extract_recommendations(envelope) == [1, 2]

    @pytest.mark.parametrize(
        "envelope",
        [
            {},
            {"candidates": []},
            {"candidates": [{}]},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"content": {"parts": [{"inline_data": {}}]}}]},
        ],
    )
    def test_missing_steps_return_none(self, envelope):
        assert get_reply_text(envelope) is None

    def test_empty_sdk_response_fails(self):
        """A response with no candidates has nothing to extract."""
        envelope = types.GenerateContentResponse()

        with pytest.raises(ResponseParseError):
            extract_recommendations(envelope)


class TestCustomStrategies:
    """extract_recommendations accepts a replacement strategy list."""

    def test_single_strategy(self, gemini_response):
        envelope = gemini_response("noise " + json.dumps(SAMPLE))

        with pytest.raises(ResponseParseError):
            extract_recommendations(envelope, strategies=[StrictEnvelopeStrategy()])

    def test_no_strategies(self, gemini_response):
        with pytest.raises(ResponseParseError):
            extract_recommendations(gemini_response("[]"), strategies=[])
