"""
Mirror module interface.

Lifecycle services depend on IDirectoryMirror, not on Supabase. The
connected and demo adapters both implement it, and tests substitute their
own implementations (e.g. a mirror that always fails).
"""

from typing import Any, Optional, Protocol, runtime_checkable

from .models import MirrorMode, MirrorResult


@runtime_checkable
class IDirectoryMirror(Protocol):
    """
    Interface for the external directory mirror.

    Implementations must never raise from these methods: provider errors
    are converted into ``MirrorResult(success=False)``.
    """

    @property
    def mode(self) -> MirrorMode:
        """The adapter's operating mode."""
        ...

    async def push_verification(
        self,
        key: str,
        email: str,
        status: str,
        notes: Optional[str] = None,
    ) -> MirrorResult:
        """
        Mirror a verification decision.

        Args:
            key: The user's id, or the request id when no user is linked
            email: Email address on the request
            status: "approved" or "rejected"
            notes: Reviewer notes
        """
        ...

    async def push_moderation(
        self,
        post_id: str,
        action: str,
        reason: Optional[str] = None,
    ) -> MirrorResult:
        """Mirror a moderation decision and its audit entry."""
        ...

    async def upload_document(
        self,
        user_id: str,
        content: bytes,
        filename: str,
        content_type: str,
    ) -> MirrorResult:
        """
        Store an ID document and return a readable URL in ``result.url``.

        Size and type limits are enforced by the caller.
        """
        ...

    async def read_chat(self, chat_id: str) -> MirrorResult:
        """Read a chat; the snapshot is returned in ``result.chat``."""
        ...

    async def push_stats(self, stats: dict[str, Any]) -> MirrorResult:
        """Mirror a partial stats update."""
        ...

    async def check_connection(self) -> MirrorResult:
        """Verify the remote store is reachable."""
        ...
