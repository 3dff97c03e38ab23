"""
Verifications module interface.

The API layer depends on IVerificationService for the student
verification lifecycle.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import BulkReviewResult, VerificationCreate, VerificationRequest


@runtime_checkable
class IVerificationService(Protocol):
    """
    Interface for the verification lifecycle.

    States: pending -> approved, pending -> rejected. A reviewed request can
    be reviewed again (last write wins); it cannot return to pending.
    """

    async def submit(self, data: VerificationCreate) -> VerificationRequest:
        """
        Submit a verification request.

        The request is stored as pending and the pending counter is nudged.
        Nothing is mirrored on submission.

        Raises:
            InvalidEmailError: If the email is malformed
            EmailDomainNotAllowedError: If the email is not educational
        """
        ...

    async def review(
        self,
        verification_id: int,
        status: str,
        notes: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> VerificationRequest:
        """
        Approve or reject a verification request.

        The request is updated first, then the decision is logged and
        mirrored best-effort. A mirror failure never undoes the update.

        Args:
            verification_id: Request id
            status: "approved" or "rejected"
            notes: Optional reviewer notes
            expected_version: Optional optimistic concurrency check

        Returns:
            The updated request

        Raises:
            InvalidReviewStatusError: If status is not approved/rejected
            VerificationNotFoundError: If the request doesn't exist
            ConflictError: If expected_version is stale
        """
        ...

    async def bulk_review(
        self,
        ids: list[int],
        action: str,
        notes: Optional[str] = None,
    ) -> BulkReviewResult:
        """
        Review several requests independently.

        Unknown ids are skipped and reported; they never abort the batch.

        Raises:
            InvalidBulkActionError: If action is not approve/reject
        """
        ...

    async def get_verification(self, verification_id: int) -> VerificationRequest:
        """
        Get a request by id.

        Raises:
            VerificationNotFoundError: If the request doesn't exist
        """
        ...

    async def list_verifications(self, status: Optional[str] = None) -> list[VerificationRequest]:
        """List requests, optionally filtered by status."""
        ...

    async def list_pending(self) -> list[VerificationRequest]:
        """List requests waiting for review."""
        ...
