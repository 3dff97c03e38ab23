"""
User repository for the in-memory store.
"""

from datetime import datetime
from typing import Any, Optional

from modules.verifications.models import VerificationStatus
from shared.models import utc_now
from shared.repository import InMemoryRepository
from .models import User, UserCreate, UserStatus


class UserRepository(InMemoryRepository[User]):
    """Repository for user accounts. Every update stamps ``updated_at``."""

    stamps_updated_at = True
    collection = "user"

    def create(self, data: UserCreate, created_at: Optional[datetime] = None) -> User:
        timestamp = created_at or utc_now()
        return self._insert(lambda user_id: User(
            id=user_id,
            created_at=timestamp,
            updated_at=timestamp,
            **data.model_dump(),
        ))

    def list_by_status(self, status: Optional[UserStatus] = None) -> list[User]:
        if status is None:
            return self.list_newest_first()
        return [user for user in self.all() if user.status == status]

    def update(
        self,
        user_id: int,
        changes: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[User]:
        result = self._update(user_id, changes, expected_version)
        return result[1] if result else None

    def apply_verification(self, user_id: int, status: VerificationStatus) -> Optional[User]:
        """Reflect a verification decision on the user's flags."""
        return self.update(user_id, {
            "verified": status == VerificationStatus.APPROVED,
            "verification_status": status,
        })

    def record_id_upload(self, user_id: int, url: str) -> Optional[User]:
        return self.update(user_id, {"id_uploaded": True, "id_url": url})
