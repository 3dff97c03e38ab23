"""
Mirror adapter factory.

Picks the connected adapter when Supabase credentials are configured and
falls back to demo mode otherwise, including when client creation fails.
"""

import logging

from shared.config import Settings
from shared.database import get_supabase_client
from .demo import DemoDirectoryMirror
from .interfaces import IDirectoryMirror
from .supabase_mirror import SupabaseDirectoryMirror

logger = logging.getLogger(__name__)


def create_directory_mirror(settings: Settings) -> IDirectoryMirror:
    """
    Create the directory mirror for the configured environment.

    Args:
        settings: Application settings

    Returns:
        A connected Supabase mirror, or a demo mirror
    """
    demo = DemoDirectoryMirror(settings.demo_storage_base_url)

    if not settings.mirror_configured:
        logger.info("No Supabase credentials found - directory mirror running in demo mode")
        return demo

    try:
        client = get_supabase_client(settings)
    except Exception:
        logger.exception("Supabase client initialization failed, continuing in demo mode")
        return demo

    logger.info("Directory mirror connected to Supabase")
    return SupabaseDirectoryMirror(
        client,
        admin_identity=settings.admin_identity,
        bucket=settings.supabase_storage_bucket,
        timeout_seconds=settings.mirror_timeout_seconds,
        signed_url_ttl_seconds=settings.signed_url_ttl_seconds,
    )
