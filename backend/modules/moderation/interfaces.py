"""
Moderation module interface.

The API layer depends on IModerationService for all post moderation.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import ModerationLogEntry, ModerationOutcome, Post


@runtime_checkable
class IModerationService(Protocol):
    """
    Interface for the post moderation lifecycle.

    States: pending/flagged -> approved, pending/flagged -> rejected.
    """

    async def moderate_post(
        self,
        post_id: int,
        action: str,
        reason: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> ModerationOutcome:
        """
        Approve or reject a post.

        The post is updated, a log entry is always appended (also when the
        post already had that status), then the decision is mirrored
        best-effort.

        Args:
            post_id: Post id
            action: "approve" or "reject"
            reason: Optional moderator reason
            expected_version: Optional optimistic concurrency check

        Returns:
            The updated post and the echoed action

        Raises:
            InvalidModerationActionError: If action is not approve/reject
            PostNotFoundError: If the post doesn't exist
            ConflictError: If expected_version is stale
        """
        ...

    async def get_post(self, post_id: int) -> Post:
        """
        Get a post by id.

        Raises:
            PostNotFoundError: If the post doesn't exist
        """
        ...

    async def list_posts(self, status: Optional[str] = None) -> list[Post]:
        """List posts, optionally filtered by moderation status."""
        ...

    async def list_flagged(self) -> list[Post]:
        """List posts waiting in the flagged queue."""
        ...

    async def list_logs(self, post_id: Optional[int] = None) -> list[ModerationLogEntry]:
        """List moderation log entries, newest first."""
        ...
