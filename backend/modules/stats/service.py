"""
Stats service implementation.
"""

import logging
from typing import Optional

from modules.mirror.interfaces import IDirectoryMirror
from modules.mirror.sync import push_best_effort
from .exceptions import StatsNotInitializedError
from .interfaces import IStatsService
from .models import StatsPatch, SystemStats
from .repository import StatsRepository

logger = logging.getLogger(__name__)


class StatsService(IStatsService):
    """
    Stats cache backed by the in-memory StatsRepository.

    Reads return the cached row as-is; nothing is derived from the
    verification, post or user collections.
    """

    def __init__(self, repository: StatsRepository, mirror: IDirectoryMirror):
        self._repository = repository
        self._mirror = mirror

    async def get_stats(self) -> SystemStats:
        stats = self._repository.get()
        if stats is None:
            raise StatsNotInitializedError()
        return stats

    async def patch_stats(self, patch: StatsPatch) -> SystemStats:
        changes = patch.changes()
        stats = self._repository.patch(changes)
        logger.info(f"Stats patched: {changes}")

        if changes:
            await push_best_effort(
                self._mirror,
                "push_stats",
                "current",
                lambda: self._mirror.push_stats(changes),
            )
        return stats

    async def nudge(self, **deltas: int) -> Optional[SystemStats]:
        stats = self._repository.adjust(deltas)
        if stats is None:
            logger.debug(f"Stats not initialized, ignoring nudge {deltas}")
        return stats
