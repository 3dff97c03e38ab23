"""
The in-memory request store.

One DataStore is built per process by the service container and shared by
every service; tests build their own.
"""

import logging
from dataclasses import dataclass, field

from modules.moderation.repository import ModerationLogRepository, PostRepository
from modules.stats.repository import StatsRepository
from modules.users.repository import UserRepository
from modules.verifications.repository import VerificationRepository

logger = logging.getLogger(__name__)


@dataclass
class DataStore:
    """All collections of the admin console."""

    verifications: VerificationRepository = field(default_factory=VerificationRepository)
    posts: PostRepository = field(default_factory=PostRepository)
    moderation_logs: ModerationLogRepository = field(default_factory=ModerationLogRepository)
    users: UserRepository = field(default_factory=UserRepository)
    stats: StatsRepository = field(default_factory=StatsRepository)


def build_store(seed: bool = True) -> DataStore:
    """
    Create a store, optionally filled with sample data.

    Args:
        seed: Load the sample verifications, posts, users and stats
    """
    store = DataStore()
    if seed:
        from modules.seed import seed_store
        seed_store(store)
        logger.info(
            f"Store seeded: {len(store.verifications)} verifications, "
            f"{len(store.posts)} posts, {len(store.users)} users"
        )
    return store
