"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: int):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidUserActionError(ValidationError):
    """Raised for an unknown account action."""

    def __init__(self, action: str):
        super().__init__(
            "Invalid action. Must be 'suspend', 'activate' or 'approve'",
            code="INVALID_ACTION",
            details={"field": "action", "action": action},
        )


class InvalidUserStatusError(ValidationError):
    """Raised when filtering by an unknown account status."""

    def __init__(self, status: str):
        super().__init__(
            f"Invalid user status: {status}",
            code="INVALID_STATUS",
            details={"field": "status", "status": status},
        )
