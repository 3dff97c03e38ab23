"""
Verification service implementation.

Orchestrates the verification lifecycle: validate, persist, nudge the
stats cache, log the decision, then mirror best-effort.
"""

import logging
from typing import Optional

from modules.mirror.interfaces import IDirectoryMirror
from modules.mirror.sync import push_best_effort
from modules.moderation.models import LogAction
from modules.moderation.repository import ModerationLogRepository
from modules.stats.interfaces import IStatsService
from modules.users.repository import UserRepository
from shared.models import utc_now
from .exceptions import (
    InvalidBulkActionError,
    InvalidReviewStatusError,
    InvalidVerificationStatusError,
    VerificationNotFoundError,
)
from .interfaces import IVerificationService
from .models import (
    BULK_ACTIONS,
    REVIEW_STATUSES,
    BulkReviewResult,
    VerificationCreate,
    VerificationRequest,
    VerificationStatus,
)
from .repository import VerificationRepository
from .rules import check_educational_email

logger = logging.getLogger(__name__)


def parse_review_status(status: str) -> VerificationStatus:
    try:
        parsed = VerificationStatus(status)
    except ValueError:
        raise InvalidReviewStatusError(status)
    if parsed not in REVIEW_STATUSES:
        raise InvalidReviewStatusError(status)
    return parsed


def mirror_key(request: VerificationRequest) -> str:
    """Remote document key: the owning user, or the request id if none."""
    if request.user_id is not None:
        return str(request.user_id)
    return str(request.id)


class VerificationService(IVerificationService):
    """
    Verification lifecycle over the in-memory store.

    Implements IVerificationService protocol.
    """

    def __init__(
        self,
        repository: VerificationRepository,
        logs: ModerationLogRepository,
        stats: IStatsService,
        mirror: IDirectoryMirror,
        users: Optional[UserRepository] = None,
        admin_identity: str = "admin",
    ):
        self._requests = repository
        self._logs = logs
        self._stats = stats
        self._mirror = mirror
        self._users = users
        self._admin_identity = admin_identity

    async def submit(self, data: VerificationCreate) -> VerificationRequest:
        check_educational_email(data.email)

        request = self._requests.create(data)
        await self._stats.nudge(pending_verifications=1)

        logger.info(f"Verification {request.id} submitted for {request.email}")
        return request

    async def review(
        self,
        verification_id: int,
        status: str,
        notes: Optional[str] = None,
        expected_version: Optional[int] = None,
    ) -> VerificationRequest:
        decision = parse_review_status(status)

        result = self._requests.update(
            verification_id,
            {
                "status": decision,
                "notes": notes,
                "reviewed_by": self._admin_identity,
                "reviewed_at": utc_now(),
            },
            expected_version=expected_version,
        )
        if result is None:
            raise VerificationNotFoundError(verification_id)
        before, request = result

        if before.status == VerificationStatus.PENDING:
            await self._stats.nudge(pending_verifications=-1)

        self._logs.append(
            action=(
                LogAction.VERIFY_STUDENT
                if decision == VerificationStatus.APPROVED
                else LogAction.REJECT_VERIFICATION
            ),
            moderator_id=self._admin_identity,
            reason=notes,
        )

        if self._users is not None and request.user_id is not None:
            self._users.apply_verification(request.user_id, decision)

        logger.info(
            f"Verification {verification_id} {before.status.value} -> {decision.value} "
            f"by {self._admin_identity}"
        )

        key = mirror_key(request)
        await push_best_effort(
            self._mirror,
            "push_verification",
            key,
            lambda: self._mirror.push_verification(key, request.email, decision.value, notes),
        )

        return request

    async def bulk_review(
        self,
        ids: list[int],
        action: str,
        notes: Optional[str] = None,
    ) -> BulkReviewResult:
        decision = BULK_ACTIONS.get(action)
        if decision is None:
            raise InvalidBulkActionError(action)

        result = BulkReviewResult()
        for verification_id in ids:
            try:
                request = await self.review(verification_id, decision.value, notes)
            except VerificationNotFoundError:
                result.skipped.append(verification_id)
                continue
            result.updated.append(request)

        logger.info(
            f"Bulk {decision.value}: {result.count} updated, {len(result.skipped)} skipped"
        )
        return result

    async def get_verification(self, verification_id: int) -> VerificationRequest:
        request = self._requests.get(verification_id)
        if request is None:
            raise VerificationNotFoundError(verification_id)
        return request

    async def list_verifications(self, status: Optional[str] = None) -> list[VerificationRequest]:
        if status is None:
            return self._requests.list_by_status()
        try:
            parsed = VerificationStatus(status)
        except ValueError:
            raise InvalidVerificationStatusError(status)
        return self._requests.list_by_status(parsed)

    async def list_pending(self) -> list[VerificationRequest]:
        return self._requests.list_by_status(VerificationStatus.PENDING)
