"""
Moderation repositories for the in-memory store.

- PostRepository: posts and their moderation state
- ModerationLogRepository: append-only audit log
"""

from datetime import datetime
from typing import Any, Optional

from shared.models import utc_now
from shared.repository import InMemoryRepository
from .models import (
    LogAction,
    ModerationLogEntry,
    ModerationStatus,
    Post,
    PostCreate,
)


class PostRepository(InMemoryRepository[Post]):
    """
    Repository for posts.

    Every update stamps ``updated_at``.
    """

    stamps_updated_at = True
    collection = "post"

    def create(self, data: PostCreate, created_at: Optional[datetime] = None) -> Post:
        """
        Create a post.

        Args:
            data: Post fields.
            created_at: Explicit creation time (seed data); defaults to now.
        """
        timestamp = created_at or utc_now()
        return self._insert(lambda post_id: Post(
            id=post_id,
            created_at=timestamp,
            updated_at=timestamp,
            **data.model_dump(),
        ))

    def list_by_status(self, status: Optional[ModerationStatus] = None) -> list[Post]:
        """
        List posts.

        Without a filter, all posts newest first. With a filter, matching
        posts in natural order.
        """
        if status is None:
            return self.list_newest_first()
        return [post for post in self.all() if post.moderation_status == status]

    def update(
        self,
        post_id: int,
        changes: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[tuple[Post, Post]]:
        return self._update(post_id, changes, expected_version)


class ModerationLogRepository(InMemoryRepository[ModerationLogEntry]):
    """
    Append-only moderation log.

    Exposes no update or delete; entries are never deduplicated.
    """

    collection = "moderation log entry"

    def append(
        self,
        action: LogAction,
        moderator_id: str,
        post_id: Optional[int] = None,
        reason: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> ModerationLogEntry:
        return self._insert(lambda entry_id: ModerationLogEntry(
            id=entry_id,
            post_id=post_id,
            action=action,
            moderator_id=moderator_id,
            reason=reason,
            created_at=created_at or utc_now(),
        ))

    def list_all(self, post_id: Optional[int] = None) -> list[ModerationLogEntry]:
        """Entries newest first, optionally only those for one post."""
        entries = self.list_newest_first()
        if post_id is not None:
            entries = [entry for entry in entries if entry.post_id == post_id]
        return entries
