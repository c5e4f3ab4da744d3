"""
Supabase client lifecycle for the contractor store.

The client is created once when the application starts (see the lifespan
in contractor_risk/main.py), kept on app.state and handed to route handlers
through the get_store_client dependency. Nothing here caches a client in
module state.
"""

import logging
from typing import Optional

from fastapi import Request
from supabase import Client, create_client

from contractor_risk.config import settings
from contractor_risk.utils.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def create_store_client() -> Optional[Client]:
    """
    Create the Supabase client used for contractor queries.

    Returns:
        A Supabase client, or None when SUPABASE_URL / SUPABASE_KEY are not
        configured (the recommendation endpoint does not need the store).
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.warning(
            "SUPABASE_URL or SUPABASE_KEY not configured. "
            "GET /contractors will return errors until they are set."
        )
        return None

    client: Client = create_client(
        supabase_url=settings.SUPABASE_URL,
        supabase_key=settings.SUPABASE_KEY
    )
    logger.info("Supabase client initialized for the contractor store")
    return client


def get_store_client(request: Request) -> Client:
    """
    FastAPI dependency returning the process-wide store client.

    Raises:
        StoreUnavailableError: If the store was not configured at startup
    """
    client = getattr(request.app.state, "store_client", None)
    if client is None:
        raise StoreUnavailableError("Contractor store is not configured")
    return client
