"""
Verifications module.

Handles student verification requests from submission to review.

Public API:
- IVerificationService: Interface for verification operations
- VerificationRequest: A stored request
- VerificationCreate: Request to submit a verification
- is_educational_email: Email domain rule
"""

from .interfaces import IVerificationService
from .models import (
    BulkReviewRequest,
    BulkReviewResponse,
    BulkReviewResult,
    ReviewRequest,
    VerificationCreate,
    VerificationRequest,
    VerificationStatus,
)
from .exceptions import (
    EmailDomainNotAllowedError,
    InvalidBulkActionError,
    InvalidEmailError,
    InvalidReviewStatusError,
    InvalidVerificationStatusError,
    VerificationNotFoundError,
)
from .rules import EDUCATIONAL_DOMAINS, check_educational_email, is_educational_email

__all__ = [
    # Interface
    "IVerificationService",
    # Models
    "BulkReviewRequest",
    "BulkReviewResponse",
    "BulkReviewResult",
    "ReviewRequest",
    "VerificationCreate",
    "VerificationRequest",
    "VerificationStatus",
    # Exceptions
    "EmailDomainNotAllowedError",
    "InvalidBulkActionError",
    "InvalidEmailError",
    "InvalidReviewStatusError",
    "InvalidVerificationStatusError",
    "VerificationNotFoundError",
    # Rules
    "EDUCATIONAL_DOMAINS",
    "check_educational_email",
    "is_educational_email",
]
