"""
Moderation service implementation.

Orchestrates a moderation decision: validate, update the post, append to
the moderation log, then mirror best-effort.
"""

import logging
from typing import Optional

from modules.mirror.interfaces import IDirectoryMirror
from modules.mirror.sync import push_best_effort
from .exceptions import (
    InvalidModerationActionError,
    InvalidPostStatusError,
    PostNotFoundError,
)
from .interfaces import IModerationService
from .models import (
    LogAction,
    ModerationAction,
    ModerationLogEntry,
    ModerationOutcome,
    ModerationStatus,
    Post,
)
from .repository import ModerationLogRepository, PostRepository

logger = logging.getLogger(__name__)


def parse_moderation_action(action: str) -> ModerationAction:
    try:
        return ModerationAction(action)
    except ValueError:
        raise InvalidModerationActionError(action)


def parse_post_status(status: Optional[str]) -> Optional[ModerationStatus]:
    if status is None:
        return None
    try:
        return ModerationStatus(status)
    except ValueError:
        raise InvalidPostStatusError(status)


class ModerationService(IModerationService):
    """
    Post moderation lifecycle over the in-memory store.

    Implements IModerationService protocol.
    """

    def __init__(
        self,
        posts: PostRepository,
        logs: ModerationLogRepository,
        mirror: IDirectoryMirror,
        admin_identity: str = "admin",
    ):
        self._posts = posts
        self._logs = logs
        self._mirror = mirror
        self._admin_identity = admin_identity

    async def moderate_post(
        self,
        post_id: int,
        action: str,
        reason: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> ModerationOutcome:
        """Approve or reject a post."""
        decision = parse_moderation_action(action)

        result = self._posts.update(
            post_id,
            {"moderation_status": decision.resulting_status},
            expected_version=expected_version,
        )
        if result is None:
            raise PostNotFoundError(post_id)
        _, post = result

        self._logs.append(
            action=LogAction(decision.value),
            moderator_id=self._admin_identity,
            post_id=post_id,
            reason=reason,
        )
        logger.info(f"Post {post_id} {decision.resulting_status.value} by {self._admin_identity}")

        await push_best_effort(
            self._mirror,
            "push_moderation",
            str(post_id),
            lambda: self._mirror.push_moderation(str(post_id), decision.value, reason),
        )

        return ModerationOutcome(post=post, action=decision)

    async def get_post(self, post_id: int) -> Post:
        post = self._posts.get(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def list_posts(self, status: Optional[str] = None) -> list[Post]:
        return self._posts.list_by_status(parse_post_status(status))

    async def list_flagged(self) -> list[Post]:
        return self._posts.list_by_status(ModerationStatus.FLAGGED)

    async def list_logs(self, post_id: Optional[int] = None) -> list[ModerationLogEntry]:
        return self._logs.list_all(post_id)
