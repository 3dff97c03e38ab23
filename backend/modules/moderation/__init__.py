"""
Moderation module.

Handles the flagged-post queue, moderation decisions and the
append-only moderation log.

Public API:
- IModerationService: Interface for moderation operations
- Post: A post as seen by moderators
- ModerationLogEntry: One audit entry
- ModerateRequest: Request to approve or reject a post
"""

from .interfaces import IModerationService
from .models import (
    LogAction,
    ModerateRequest,
    ModerationAction,
    ModerationLogEntry,
    ModerationOutcome,
    ModerationResponse,
    ModerationStatus,
    Post,
    PostCreate,
    PostPriority,
)
from .exceptions import (
    InvalidModerationActionError,
    InvalidPostStatusError,
    PostNotFoundError,
)

__all__ = [
    # Interface
    "IModerationService",
    # Models
    "LogAction",
    "ModerateRequest",
    "ModerationAction",
    "ModerationLogEntry",
    "ModerationOutcome",
    "ModerationResponse",
    "ModerationStatus",
    "Post",
    "PostCreate",
    "PostPriority",
    # Exceptions
    "InvalidModerationActionError",
    "InvalidPostStatusError",
    "PostNotFoundError",
]
