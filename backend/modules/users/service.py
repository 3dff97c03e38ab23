"""
User management service.

Account actions available to admins:
- suspend: block the account
- activate: lift a suspension
- approve: mark the student as verified and activate the account
"""

import logging
from typing import Optional

from modules.verifications.models import VerificationStatus
from .exceptions import InvalidUserActionError, InvalidUserStatusError, UserNotFoundError
from .models import User, UserAction, UserStatus
from .repository import UserRepository

logger = logging.getLogger(__name__)

_ACTION_CHANGES = {
    UserAction.SUSPEND: {"status": UserStatus.SUSPENDED},
    UserAction.ACTIVATE: {"status": UserStatus.ACTIVE},
    UserAction.APPROVE: {
        "status": UserStatus.ACTIVE,
        "verified": True,
        "verification_status": VerificationStatus.APPROVED,
    },
}


class UserService:
    """User management over the in-memory store."""

    def __init__(self, repository: UserRepository):
        self._users = repository

    async def get_user(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self, status: Optional[str] = None) -> list[User]:
        if status is None:
            return self._users.list_by_status()
        try:
            parsed = UserStatus(status)
        except ValueError:
            raise InvalidUserStatusError(status)
        return self._users.list_by_status(parsed)

    async def apply_action(self, user_id: int, action: str) -> User:
        """
        Apply an account action.

        Raises:
            InvalidUserActionError: If the action is unknown
            UserNotFoundError: If the user doesn't exist
        """
        try:
            parsed = UserAction(action)
        except ValueError:
            raise InvalidUserActionError(action)

        user = self._users.update(user_id, _ACTION_CHANGES[parsed])
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info(f"User {user_id}: {parsed.value} -> status {user.status.value}")
        return user

    async def record_id_upload(self, user_id: str, url: str) -> Optional[User]:
        """
        Mark a local user's ID document as uploaded.

        The upload form sends the user id as text; ids that are not numeric
        or unknown locally only exist in the mirror and are ignored here.
        """
        try:
            local_id = int(user_id)
        except ValueError:
            return None
        return self._users.record_id_upload(local_id, url)
