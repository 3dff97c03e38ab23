"""
Moderation module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class PostNotFoundError(NotFoundError):
    """Raised when a post is not found."""

    def __init__(self, post_id: int):
        super().__init__(
            "Post not found",
            code="POST_NOT_FOUND",
            details={"post_id": post_id},
        )


class InvalidModerationActionError(ValidationError):
    """Raised when a moderation action is neither approve nor reject."""

    def __init__(self, action: str):
        super().__init__(
            "Invalid action. Must be 'approve' or 'reject'",
            code="INVALID_ACTION",
            details={"field": "action", "action": action},
        )


class InvalidPostStatusError(ValidationError):
    """Raised when filtering by an unknown moderation status."""

    def __init__(self, status: str):
        super().__init__(
            f"Invalid moderation status: {status}",
            code="INVALID_STATUS",
            details={"field": "status", "status": status},
        )
