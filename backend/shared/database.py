"""
Database client factory for Supabase.

The console runs as a single operator, so one anon-key client is shared
by the whole process. Row Level Security is enforced by the backend
against whichever user is signed in on that client.
"""

from typing import Optional
from supabase import AsyncClient, acreate_client

from .config import Settings, get_settings, require_backend_settings

# Module-level client cache
_client: Optional[AsyncClient] = None


async def get_supabase_client(settings: Optional[Settings] = None) -> AsyncClient:
    """
    Get the process-wide Supabase client.

    Args:
        settings: Optional settings override (defaults to get_settings())

    Returns:
        Async Supabase client configured with the anon key

    Raises:
        ConfigurationError: If the Supabase URL or anon key is missing
    """
    global _client

    if _client is None:
        settings = require_backend_settings(settings or get_settings())
        _client = await acreate_client(
            settings.supabase_url,
            settings.supabase_anon_key,
        )

    return _client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _client
    _client = None
