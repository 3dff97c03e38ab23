"""
Verifications module exceptions.
"""

from typing import Any

from shared.exceptions import NotFoundError, ValidationError


class VerificationNotFoundError(NotFoundError):
    """Raised when a verification request is not found."""

    def __init__(self, verification_id: int):
        super().__init__(
            "Verification request not found",
            code="VERIFICATION_NOT_FOUND",
            details={"verification_id": verification_id},
        )


class InvalidEmailError(ValidationError):
    """Raised when an address is not a valid email."""

    def __init__(self, email: str):
        super().__init__(
            "Invalid email address",
            code="INVALID_EMAIL",
            details={"field": "email", "email": email},
        )


class EmailDomainNotAllowedError(ValidationError):
    """Raised when an address is not from a recognized educational institution."""

    def __init__(self, email: str):
        super().__init__(
            "Email must be from a recognized educational institution",
            code="EMAIL_DOMAIN_NOT_ALLOWED",
            details={"field": "email", "email": email},
        )


class InvalidReviewStatusError(ValidationError):
    """Raised when a review status is neither approved nor rejected."""

    def __init__(self, status: Any):
        super().__init__(
            "Invalid status. Must be 'approved' or 'rejected'",
            code="INVALID_STATUS",
            details={"field": "status", "status": status},
        )


class InvalidBulkActionError(ValidationError):
    """Raised for an unknown bulk review action."""

    def __init__(self, action: Any):
        super().__init__(
            "Invalid action. Must be 'approve' or 'reject'",
            code="INVALID_ACTION",
            details={"field": "action", "action": action},
        )


class InvalidVerificationStatusError(ValidationError):
    """Raised when filtering by an unknown verification status."""

    def __init__(self, status: str):
        super().__init__(
            f"Invalid verification status: {status}",
            code="INVALID_STATUS",
            details={"field": "status", "status": status},
        )
