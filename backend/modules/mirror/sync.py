"""
Best-effort mirror synchronization.

Lifecycle services call the mirror only after their local commit. A failed
or raising mirror call is logged with structured fields and swallowed; the
authoritative store is never rolled back and the caller never sees an
error. There is no retry and no reconciliation, so every failure line
marks potential drift between the store and the mirror.
"""

import logging
from typing import Awaitable, Callable, Optional

from .interfaces import IDirectoryMirror
from .models import MirrorResult

logger = logging.getLogger(__name__)


async def push_best_effort(
    mirror: IDirectoryMirror,
    operation: str,
    key: str,
    call: Callable[[], Awaitable[MirrorResult]],
) -> Optional[MirrorResult]:
    """
    Run a mirror call without letting it fail the request.

    Args:
        mirror: The active mirror (used for log context only)
        operation: Name of the mirrored operation
        key: Remote document key being written
        call: Zero-argument callable performing the mirror call

    Returns:
        The mirror result, or None if the adapter raised
    """
    mode = getattr(getattr(mirror, "mode", None), "value", "unknown")
    try:
        result = await call()
    except Exception as e:
        logger.warning(
            f"Mirror {operation} for {key} raised; local state kept: {e}",
            extra={"operation": operation, "key": key, "mode": mode, "error": str(e)},
        )
        return None

    if not result.success:
        logger.warning(
            f"Mirror {operation} for {key} failed; local state kept: {result.error}",
            extra={"operation": operation, "key": key, "mode": mode, "error": result.error},
        )
    return result
