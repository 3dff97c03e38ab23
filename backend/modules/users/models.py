"""
Users module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from modules.verifications.models import VerificationStatus
from shared.models import CamelModel


class UserStatus(str, Enum):
    """Account status."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    PENDING = "pending"  # Awaiting verification


class UserAction(str, Enum):
    """Account actions available to admins."""

    SUSPEND = "suspend"
    ACTIVATE = "activate"
    APPROVE = "approve"


class User(CamelModel):
    """A student account."""

    id: int
    email: str
    username: str
    full_name: str
    college: str
    verified: bool = False
    verification_status: VerificationStatus = VerificationStatus.PENDING
    id_uploaded: bool = False
    id_url: Optional[str] = None
    status: UserStatus = UserStatus.PENDING
    created_at: datetime
    updated_at: datetime
    version: int = 1


class UserCreate(CamelModel):
    """Data for a new user (seeding and tests)."""

    email: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    college: str = Field(..., min_length=1)
    verified: bool = False
    verification_status: VerificationStatus = VerificationStatus.PENDING
    id_uploaded: bool = False
    id_url: Optional[str] = None
    status: UserStatus = UserStatus.PENDING


class UserActionRequest(CamelModel):
    """Body of PUT /api/users/{id}/action."""

    action: str
