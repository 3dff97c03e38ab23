"""
Users module.

Admin-side account management: listing, suspension, activation and
manual approval.
"""

from .models import User, UserAction, UserActionRequest, UserCreate, UserStatus
from .exceptions import InvalidUserActionError, InvalidUserStatusError, UserNotFoundError

__all__ = [
    "User",
    "UserAction",
    "UserActionRequest",
    "UserCreate",
    "UserStatus",
    "InvalidUserActionError",
    "InvalidUserStatusError",
    "UserNotFoundError",
]
