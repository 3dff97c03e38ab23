"""
Database client factory for Supabase.

The admin console keeps its authoritative state in process memory; Supabase
is only used as the external directory mirror. The client is created with
bounded HTTP timeouts so a slow mirror cannot stall a request indefinitely.
"""

from typing import Optional
from supabase import create_client, Client
from supabase.client import ClientOptions

from .config import Settings, get_settings

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Args:
        settings: Settings to read credentials from. Defaults to the
            cached application settings.

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If Supabase credentials are not configured
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.mirror_configured:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        timeout = int(max(settings.mirror_timeout_seconds, 1))
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
            options=ClientOptions(
                postgrest_client_timeout=timeout,
                storage_client_timeout=timeout,
            ),
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
