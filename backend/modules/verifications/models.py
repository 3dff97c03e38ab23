"""
Verifications module data models.

A verification request asserts a student's enrollment at an educational
institution and waits for an admin decision.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from shared.models import ApiResponse, CamelModel


class VerificationStatus(str, Enum):
    """Status of a verification request."""

    PENDING = "pending"    # Awaiting review
    APPROVED = "approved"  # Enrollment confirmed
    REJECTED = "rejected"  # Enrollment refused


REVIEW_STATUSES = (VerificationStatus.APPROVED, VerificationStatus.REJECTED)

# Bulk actions accept the verb or the resulting status
BULK_ACTIONS = {
    "approve": VerificationStatus.APPROVED,
    "approved": VerificationStatus.APPROVED,
    "reject": VerificationStatus.REJECTED,
    "rejected": VerificationStatus.REJECTED,
}


class VerificationRequest(CamelModel):
    """A stored verification request."""

    id: int
    user_id: Optional[int] = None
    email: str
    full_name: str
    college: str
    status: VerificationStatus = VerificationStatus.PENDING
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime
    version: int = 1


class VerificationCreate(CamelModel):
    """
    Body of POST /api/verify-student.

    Any status sent by the client is ignored; requests always start pending.
    """

    email: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    college: str = Field(..., min_length=1)
    user_id: Optional[int] = None
    notes: Optional[str] = None


class ReviewRequest(CamelModel):
    """Body of PUT /api/verifications/{id}."""

    status: str
    notes: Optional[str] = None
    version: Optional[int] = Field(
        None,
        description="Expected request version; the review is refused with 409 on mismatch",
    )


class BulkReviewRequest(CamelModel):
    """Body of POST /api/verifications/bulk-action."""

    ids: list[int] = Field(..., min_length=1)
    action: str
    notes: Optional[str] = None


class BulkReviewResult(CamelModel):
    """Outcome of a bulk review. Unknown ids are skipped, not fatal."""

    updated: list[VerificationRequest] = Field(default_factory=list)
    skipped: list[int] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.updated)


class BulkReviewResponse(ApiResponse[list[VerificationRequest]]):
    """Envelope for a bulk review."""

    count: int
    skipped: list[int] = Field(default_factory=list)


class EmailCheckRequest(CamelModel):
    """Body of POST /api/validate-email. Left untyped so the route can answer bad input."""

    email: Any = None


class EmailCheckResponse(CamelModel):
    valid: bool
    message: str


class SubmitResponse(CamelModel):
    """Response of POST /api/verify-student."""

    success: bool = True
    message: str
    id: int
