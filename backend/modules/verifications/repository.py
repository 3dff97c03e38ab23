"""
Verification request repository for the in-memory store.
"""

from datetime import datetime
from typing import Any, Optional

from shared.models import utc_now
from shared.repository import InMemoryRepository
from .models import VerificationCreate, VerificationRequest, VerificationStatus


class VerificationRepository(InMemoryRepository[VerificationRequest]):
    """
    Repository for verification requests.

    Updates do not stamp an update time; the review time is ``reviewed_at``,
    set explicitly by the caller.
    """

    collection = "verification request"

    def create(
        self,
        data: VerificationCreate,
        created_at: Optional[datetime] = None,
    ) -> VerificationRequest:
        """Persist a new request. Status is always pending."""
        return self._insert(lambda request_id: VerificationRequest(
            id=request_id,
            user_id=data.user_id,
            email=data.email,
            full_name=data.full_name,
            college=data.college,
            notes=data.notes,
            status=VerificationStatus.PENDING,
            created_at=created_at or utc_now(),
        ))

    def list_by_status(
        self,
        status: Optional[VerificationStatus] = None,
    ) -> list[VerificationRequest]:
        """
        List requests.

        Without a filter, all requests newest first. With a filter, matching
        requests in natural order.
        """
        if status is None:
            return self.list_newest_first()
        return [request for request in self.all() if request.status == status]

    def update(
        self,
        request_id: int,
        changes: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[tuple[VerificationRequest, VerificationRequest]]:
        return self._update(request_id, changes, expected_version)
