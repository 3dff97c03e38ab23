"""
Base repository class for the in-memory request store.

Provides the common storage mechanics shared by every collection: a
monotonic id counter, a lock that serializes writes, merge-patch updates
and an optimistic version check. Subclasses add domain-specific creation
and query methods and own the mapping to their Pydantic models.
"""

import itertools
import threading
from datetime import datetime
from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from .exceptions import ConflictError
from .models import utc_now


T = TypeVar("T", bound=BaseModel)


class InMemoryRepository(Generic[T]):
    """
    Base class for all in-memory repositories.

    Records are Pydantic models carrying ``id``, ``created_at`` and
    ``version`` fields. Ids are unique for the lifetime of the process
    only; nothing is persisted across restarts.

    Example:
        class PostRepository(InMemoryRepository[Post]):
            stamps_updated_at = True

            def create(self, data: PostCreate) -> Post:
                return self._insert(lambda post_id: Post(id=post_id, ...))
    """

    # Set on subclasses whose records carry an updated_at column
    stamps_updated_at: bool = False

    # Human-readable collection name used in error messages
    collection: str = "record"

    def __init__(self) -> None:
        self._records: dict[int, T] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: int) -> Optional[T]:
        """Get a record by id, or None if it does not exist."""
        return self._records.get(record_id)

    def all(self) -> list[T]:
        """All records in natural (insertion) order."""
        with self._lock:
            return list(self._records.values())

    def list_newest_first(self) -> list[T]:
        """All records sorted by creation time, newest first."""
        return sorted(self.all(), key=self._recency, reverse=True)

    # -------------------------------------------------------------------------
    # Write helpers for subclasses
    # -------------------------------------------------------------------------

    def _insert(self, build: Callable[[int], T]) -> T:
        """
        Allocate the next id, build the record and store it.

        Args:
            build: Callable receiving the new id and returning the record.

        Returns:
            The stored record.
        """
        with self._lock:
            record = build(next(self._ids))
            self._records[record.id] = record
            return record

    def _update(
        self,
        record_id: int,
        changes: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[tuple[T, T]]:
        """
        Merge-patch a record.

        Fields not present in ``changes`` are preserved. The version is
        bumped on every successful update.

        Args:
            record_id: Id of the record to update.
            changes: Field values to overwrite (snake_case field names).
            expected_version: If given, the update is refused unless the
                stored record still has this version.

        Returns:
            A ``(before, after)`` pair, or None if the id is unknown.

        Raises:
            ConflictError: If ``expected_version`` does not match.
        """
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None

            if expected_version is not None and current.version != expected_version:
                raise ConflictError(
                    f"{self.collection.capitalize()} {record_id} was modified by another reviewer",
                    code="VERSION_CONFLICT",
                    details={
                        "id": record_id,
                        "expected_version": expected_version,
                        "current_version": current.version,
                    },
                )

            update = dict(changes)
            update["version"] = current.version + 1
            if self.stamps_updated_at:
                update["updated_at"] = utc_now()

            updated = current.model_copy(update=update)
            self._records[record_id] = updated
            return current, updated

    @staticmethod
    def _recency(record: T) -> tuple[datetime, int]:
        """Sort key: creation time, ties broken by id."""
        return record.created_at, record.id
