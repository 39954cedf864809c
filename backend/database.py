"""
Database module for Supabase integration.

Builds the Supabase client shared by the repositories and the auth service.
"""
import logging
from typing import Optional

from supabase import Client, create_client

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_supabase_client(settings: Optional[Settings] = None) -> Optional[Client]:
    """
    Get Supabase client instance.

    Returns None (after logging why) when credentials are missing or the
    client cannot be created; callers treat that as "backend unavailable".
    """
    settings = settings or get_settings()

    if not settings.supabase_configured:
        logger.warning("Supabase credentials not configured. Routine sync will be disabled.")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None
