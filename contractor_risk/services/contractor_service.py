"""
Contractor service.

Read-only access to the contractor store. Risk scores are never computed
here: each contractor row is joined with the output of the database's
calculate_contractor_risk_score(contractor_id) function.
"""

import logging
from typing import Any, Dict, List, cast

from supabase import Client

logger = logging.getLogger(__name__)

CONTRACTORS_TABLE = "contractors"
RISK_SCORE_FUNCTION = "calculate_contractor_risk_score"
RISK_FIELDS = ("risk_score", "risk_factors", "calculation_details")


def _calculate_risk(supabase_client: Client, contractor_id: Any) -> Dict[str, Any]:
    """
    Call the risk-scoring RPC for one contractor.

    The function returns a single row; PostgREST hands it back either as a
    one-element list or as an object depending on how it is declared.
    """
    result = supabase_client.rpc(
        RISK_SCORE_FUNCTION,
        {"contractor_id": contractor_id}
    ).execute()

    data = result.data
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        return {field: None for field in RISK_FIELDS}

    return {field: data.get(field) for field in RISK_FIELDS}


async def get_contractors_with_risk_scores(supabase_client: Client) -> List[Dict[str, Any]]:
    """
    Fetch every contractor together with its computed risk fields.

    Args:
        supabase_client: Store client created at application startup

    Returns:
        List of contractor dicts ordered by id, each carrying risk_score,
        risk_factors and calculation_details
    """
    logger.debug("Fetching contractors with risk scores")

    result = (
        supabase_client.table(CONTRACTORS_TABLE)
        .select("*")
        .order("id")
        .execute()
    )

    rows: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])

    contractors = []
    for row in rows:
        risk = _calculate_risk(supabase_client, row.get("id"))
        if risk["risk_factors"] is None:
            risk["risk_factors"] = []
        contractors.append({**row, **risk})

    logger.info(f"Found {len(contractors)} contractors")
    return contractors
