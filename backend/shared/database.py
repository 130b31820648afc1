"""
Database client factory for Supabase.

The backend talks to Supabase with the service role key; ownership of
rows is enforced by the service layer, which scopes every query to the
authenticated user.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings
from .exceptions import ConfigurationError

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Args:
        settings: Settings to build the client from (defaults to cached settings)

    Returns:
        Supabase client configured with service role key

    Raises:
        ConfigurationError: If the Supabase URL or key is not set
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise ConfigurationError(
                "Supabase configuration missing. "
                "Set STYLESTASH_SUPABASE_URL and STYLESTASH_SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
