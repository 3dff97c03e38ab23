"""
Moderation module data models.

These models define posts as seen by moderators and the append-only
moderation log.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, field_serializer

from shared.models import ApiResponse, CamelModel


class ModerationStatus(str, Enum):
    """Moderation state of a post."""

    PENDING = "pending"    # Not yet reviewed
    APPROVED = "approved"  # Terminal for this review
    REJECTED = "rejected"  # Terminal for this review
    FLAGGED = "flagged"    # Reported; awaiting a moderator


class PostPriority(str, Enum):
    """Queue priority of a flagged post."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ModerationAction(str, Enum):
    """Decisions a moderator can take on a post."""

    APPROVE = "approve"
    REJECT = "reject"

    @property
    def resulting_status(self) -> ModerationStatus:
        if self is ModerationAction.APPROVE:
            return ModerationStatus.APPROVED
        return ModerationStatus.REJECTED


class LogAction(str, Enum):
    """
    Actions recorded in the moderation log.

    ``OTHER`` is the escape hatch for audit entries that fit no named
    action; the free-text detail then goes into the entry's reason.
    """

    APPROVE = "approve"
    REJECT = "reject"
    APPROVE_POST = "approve_post"
    FLAG_POST = "flag_post"
    VERIFY_STUDENT = "verify_student"
    REJECT_VERIFICATION = "reject_verification"
    OTHER = "other"


class Post(CamelModel):
    """A post in the moderation queue."""

    id: int
    user_id: Optional[int] = None
    content: str
    moderation_status: ModerationStatus = ModerationStatus.PENDING
    flagged_by: set[str] = Field(default_factory=set, description="Reporter ids")
    flag_reason: Optional[str] = None
    priority: PostPriority = PostPriority.LOW
    created_at: datetime
    updated_at: datetime
    version: int = 1

    @field_serializer("flagged_by")
    def _serialize_flagged_by(self, flagged_by: set[str]) -> list[str]:
        return sorted(flagged_by)


class PostCreate(CamelModel):
    """Data for a new post (seeding, tests and future intake)."""

    user_id: Optional[int] = None
    content: str = Field(..., min_length=1)
    moderation_status: ModerationStatus = ModerationStatus.PENDING
    flagged_by: set[str] = Field(default_factory=set)
    flag_reason: Optional[str] = None
    priority: PostPriority = PostPriority.LOW


class ModerationLogEntry(CamelModel):
    """One audit entry. Never updated or deleted."""

    id: int
    post_id: Optional[int] = None
    action: LogAction
    moderator_id: str
    reason: Optional[str] = None
    created_at: datetime


class ModerateRequest(CamelModel):
    """Body of PUT /api/posts/{id}/moderate."""

    action: str
    reason: Optional[str] = None
    version: Optional[int] = Field(
        None,
        description="Expected post version; the update is refused with 409 on mismatch",
    )


class ModerationOutcome(CamelModel):
    """Updated post plus the echoed action."""

    post: Post
    action: ModerationAction


class ModerationResponse(ApiResponse[Post]):
    """Envelope for a moderation decision."""

    action: ModerationAction
