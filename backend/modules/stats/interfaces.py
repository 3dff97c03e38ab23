"""
Stats module interface.

Lifecycle services depend on IStatsService to nudge the dashboard
counters without knowing how they are stored or mirrored.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import StatsPatch, SystemStats


@runtime_checkable
class IStatsService(Protocol):
    """Interface for the stats cache."""

    async def get_stats(self) -> SystemStats:
        """
        Get the current counters.

        Raises:
            StatsNotInitializedError: If stats were never seeded
        """
        ...

    async def patch_stats(self, patch: StatsPatch) -> SystemStats:
        """
        Overwrite the given counters and mirror the change best-effort.

        Raises:
            StatsNotInitializedError: If stats were never seeded
        """
        ...

    async def nudge(self, **deltas: int) -> Optional[SystemStats]:
        """Adjust counters by deltas; no-op when stats are uninitialized."""
        ...
