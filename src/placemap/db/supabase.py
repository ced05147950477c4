"""Supabase client for the place registry database."""

import logging
from functools import lru_cache

from supabase import Client, create_client

from ..config import settings


@lru_cache()
def get_supabase_client() -> Client | None:
    """Get cached Supabase client instance.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_configured:
        logging.debug("Supabase credentials not configured (missing URL or key)")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logging.error(f"Failed to create Supabase client: {e}")
        return None


# Example query used by the place store:
#
# result = supabase.table('places') \
#     .select('id,placeName,placeLatitude,placeLongitude,placeCategory') \
#     .eq('isCurrent', True) \
#     .order('id') \
#     .range(0, 999) \
#     .execute()
