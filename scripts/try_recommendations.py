#!/usr/bin/env python3
"""
Recommended Actions Manual Test Script

Runs the recommendation pipeline locally against the live Gemini API,
without starting the HTTP server or touching the contractor store.

Usage:
    python scripts/try_recommendations.py
    python scripts/try_recommendations.py --name "Alice" --application CRM --access-level admin --prod
    python scripts/try_recommendations.py --payload contractor.json
"""

import argparse
import asyncio
import json
import os
import sys

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from contractor_risk.schemas.recommendations import Recommendation  # noqa: E402
from contractor_risk.services.contractor_validation import validate_contractor_payload  # noqa: E402
from contractor_risk.services.recommendation_service import generate_recommended_actions  # noqa: E402
from contractor_risk.utils.errors import ServiceError  # noqa: E402

SAMPLE_RISK_FACTORS = [
    {"factor": "Excessive permissions", "reason": "Has admin on prod", "weight": 90},
    {"factor": "Contract ending soon", "reason": "Contract ends in 5 days", "weight": 40},
]


def build_payload(args: argparse.Namespace) -> dict:
    """Build the contractor payload from a JSON file or CLI flags."""
    if args.payload:
        with open(args.payload, encoding="utf-8") as f:
            return json.load(f)

    return {
        "name": args.name,
        "project_description": args.project,
        "access_level": args.access_level,
        "application": args.application,
        "has_prod_access": args.prod,
        "risk_score": args.risk_score,
        "risk_factors": [] if args.no_factors else SAMPLE_RISK_FACTORS,
    }


def print_result(result) -> None:
    """Pretty print the recommendation result."""
    print("\n" + "=" * 60)
    print(f"CONTRACTOR: {result.contractor} (risk score: {result.risk_score})")
    print("=" * 60)

    for i, rec in enumerate(result.recommendations, 1):
        if not isinstance(rec, Recommendation):
            print(f"\n--- Recommendation #{i} (raw) ---\n  {rec!r}")
            continue
        print(f"\n--- Recommendation #{i} [{rec.priority}] ---")
        print(f"  Title:       {rec.title}")
        print(f"  Description: {rec.description}")
        print(f"  Reason:      {rec.reason}")

    print(f"\nGenerated at {result.timestamp.isoformat()}\n")


async def run(args: argparse.Namespace) -> int:
    if not (os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")):
        print("\n⚠️  ERROR: GEMINI_API_KEY environment variable not set!")
        print("   export GEMINI_API_KEY=your-gemini-api-key")
        return 1

    try:
        contractor = validate_contractor_payload(build_payload(args))
        result = await generate_recommended_actions(contractor)
    except ServiceError as e:
        print(f"\n❌ {type(e).__name__}: {e}\n")
        return 1

    print_result(result)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate recommended actions for a contractor")
    parser.add_argument("--payload", help="Path to a JSON file with one contractor")
    parser.add_argument("--name", default="Alice")
    parser.add_argument("--project", default="Data migration")
    parser.add_argument("--access-level", default="admin")
    parser.add_argument("--application", default="CRM")
    parser.add_argument("--prod", action="store_true", help="Contractor has production access")
    parser.add_argument("--risk-score", type=float, default=85)
    parser.add_argument("--no-factors", action="store_true", help="Send an empty risk factor list")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
