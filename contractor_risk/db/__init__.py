"""
Database access layer for the Contractor Risk backend.

The contractors table and the calculate_contractor_risk_score() function
live in Postgres (behind Supabase) and are owned by the database, not by
this service. DO NOT define table schemas, migrations or risk scoring here.
"""

from .client import create_store_client, get_store_client

__all__ = ["create_store_client", "get_store_client"]
