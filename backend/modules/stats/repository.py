"""
Stats repository: holds the singleton SystemStats row.
"""

import threading
from typing import Optional

from shared.models import utc_now
from .exceptions import StatsNotInitializedError, UnknownCounterError
from .models import COUNTER_FIELDS, SystemStats


class StatsRepository:
    """
    Holder for the single stats row.

    The row starts out absent; ``initialize`` seeds it. All writes are
    serialized and stamp ``updated_at``.
    """

    def __init__(self) -> None:
        self._stats: Optional[SystemStats] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[SystemStats]:
        return self._stats

    def initialize(
        self,
        total_users: int = 0,
        pending_verifications: int = 0,
        active_chats: int = 0,
        api_requests: int = 0,
    ) -> SystemStats:
        with self._lock:
            self._stats = SystemStats(
                total_users=total_users,
                pending_verifications=pending_verifications,
                active_chats=active_chats,
                api_requests=api_requests,
                updated_at=utc_now(),
            )
            return self._stats

    def patch(self, changes: dict[str, int]) -> SystemStats:
        """
        Overwrite the given counters.

        Raises:
            StatsNotInitializedError: If the row was never seeded
        """
        with self._lock:
            if self._stats is None:
                raise StatsNotInitializedError()
            self._stats = self._stats.model_copy(update={**changes, "updated_at": utc_now()})
            return self._stats

    def adjust(self, deltas: dict[str, int]) -> Optional[SystemStats]:
        """
        Add deltas to counters, clamping at zero.

        Returns None (and changes nothing) when the row was never seeded.
        """
        for field in deltas:
            if field not in COUNTER_FIELDS:
                raise UnknownCounterError(field)

        with self._lock:
            if self._stats is None:
                return None
            update = {
                field: max(getattr(self._stats, field) + delta, 0)
                for field, delta in deltas.items()
            }
            update["updated_at"] = utc_now()
            self._stats = self._stats.model_copy(update=update)
            return self._stats
