"""Tests for the verification lifecycle service."""

import logging

import pytest

from modules.moderation.models import LogAction
from modules.verifications.exceptions import (
    EmailDomainNotAllowedError,
    InvalidBulkActionError,
    InvalidReviewStatusError,
    InvalidVerificationStatusError,
    VerificationNotFoundError,
)
from modules.verifications.interfaces import IVerificationService
from modules.verifications.models import VerificationCreate, VerificationStatus
from modules.verifications.service import VerificationService, mirror_key
from shared.exceptions import ConflictError


def new_request(**overrides) -> VerificationCreate:
    fields = {
        "email": "x@stanford.edu",
        "full_name": "Test Student",
        "college": "Stanford University",
    }
    fields.update(overrides)
    return VerificationCreate(**fields)


@pytest.fixture
def service_with(store, stats_service):
    """Build a verification service around a given mirror."""
    def build(mirror) -> VerificationService:
        return VerificationService(
            repository=store.verifications,
            logs=store.moderation_logs,
            stats=stats_service,
            mirror=mirror,
            users=store.users,
        )
    return build


class TestProtocol:
    def test_implements_interface(self, verification_service):
        assert isinstance(verification_service, IVerificationService)


class TestSubmit:
    @pytest.mark.asyncio
    async def test_created_request_is_pending(self, verification_service):
        request = await verification_service.submit(new_request())
        assert request.status == VerificationStatus.PENDING
        assert request.reviewed_at is None
        assert request.version == 1

    @pytest.mark.asyncio
    async def test_client_status_is_ignored(self, verification_service):
        data = VerificationCreate.model_validate({
            "email": "x@stanford.edu",
            "fullName": "Test Student",
            "college": "Stanford",
            "status": "approved",
        })
        request = await verification_service.submit(data)
        assert request.status == VerificationStatus.PENDING

    @pytest.mark.asyncio
    async def test_ids_continue_after_seed(self, verification_service):
        request = await verification_service.submit(new_request())
        assert request.id == 4

    @pytest.mark.asyncio
    async def test_non_educational_email_is_rejected(self, verification_service, store):
        with pytest.raises(EmailDomainNotAllowedError):
            await verification_service.submit(new_request(email="someone@gmail.com"))
        assert len(store.verifications) == 3

    @pytest.mark.asyncio
    async def test_submit_nudges_pending_counter(self, verification_service, store):
        await verification_service.submit(new_request())
        assert store.stats.get().pending_verifications == 44

    @pytest.mark.asyncio
    async def test_submit_does_not_mirror(self, verification_service, mirror):
        await verification_service.submit(new_request())
        assert mirror.calls == []


class TestReview:
    @pytest.mark.asyncio
    async def test_approve_then_reject_overwrites(self, verification_service):
        approved = await verification_service.review(1, "approved")
        assert approved.status == VerificationStatus.APPROVED
        assert approved.reviewed_at is not None
        assert approved.reviewed_by == "admin"

        rejected = await verification_service.review(1, "rejected", notes="Blurry ID")
        assert rejected.status == VerificationStatus.REJECTED
        assert rejected.reviewed_at is not None
        assert rejected.notes == "Blurry ID"
        assert rejected.version == 3

    @pytest.mark.asyncio
    async def test_review_preserves_immutable_fields(self, verification_service, store):
        original = store.verifications.get(2)
        updated = await verification_service.review(2, "approved")
        assert updated.email == original.email
        assert updated.full_name == original.full_name
        assert updated.college == original.college
        assert updated.created_at == original.created_at

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found_and_mutates_nothing(self, verification_service, store, mirror):
        before = store.verifications.all()

        with pytest.raises(VerificationNotFoundError):
            await verification_service.review(999, "approved")

        assert store.verifications.all() == before
        assert store.moderation_logs.all() == []
        assert mirror.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["pending", "maybe", "APPROVED", ""])
    async def test_invalid_status(self, verification_service, store, status):
        with pytest.raises(InvalidReviewStatusError):
            await verification_service.review(1, status)
        assert store.verifications.get(1).status == VerificationStatus.PENDING

    @pytest.mark.asyncio
    async def test_stale_version_conflicts(self, verification_service):
        await verification_service.review(1, "approved", expected_version=1)
        with pytest.raises(ConflictError):
            await verification_service.review(1, "rejected", expected_version=1)

    @pytest.mark.asyncio
    async def test_review_mirrors_by_user_id(self, verification_service, mirror):
        await verification_service.review(1, "approved", notes="ok")
        assert mirror.calls == [
            ("push_verification", ("1", "sarah.j@stanford.edu", "approved", "ok")),
        ]

    @pytest.mark.asyncio
    async def test_review_without_user_mirrors_by_request_id(self, verification_service, mirror):
        created = await verification_service.submit(new_request())
        await verification_service.review(created.id, "rejected")
        operation, args = mirror.calls[-1]
        assert operation == "push_verification"
        assert args[0] == str(created.id)
        assert mirror_key(created) == str(created.id)

    @pytest.mark.asyncio
    async def test_review_appends_log_entry(self, verification_service, store):
        await verification_service.review(1, "approved", notes="Looks good")
        await verification_service.review(2, "rejected")

        entries = store.moderation_logs.all()
        assert [entry.action for entry in entries] == [
            LogAction.VERIFY_STUDENT,
            LogAction.REJECT_VERIFICATION,
        ]
        assert entries[0].post_id is None
        assert entries[0].reason == "Looks good"
        assert entries[0].moderator_id == "admin"

    @pytest.mark.asyncio
    async def test_pending_counter_only_drops_once(self, verification_service, store):
        await verification_service.review(1, "approved")
        assert store.stats.get().pending_verifications == 42
        await verification_service.review(1, "rejected")
        assert store.stats.get().pending_verifications == 42

    @pytest.mark.asyncio
    async def test_review_updates_local_user(self, verification_service, store):
        await verification_service.review(2, "approved")
        user = store.users.get(2)
        assert user.verified is True
        assert user.verification_status == VerificationStatus.APPROVED

        await verification_service.review(2, "rejected")
        user = store.users.get(2)
        assert user.verified is False
        assert user.verification_status == VerificationStatus.REJECTED


class TestMirrorFailures:
    @pytest.mark.asyncio
    async def test_raising_mirror_does_not_block_review(self, service_with, raising_mirror, store, caplog):
        service = service_with(raising_mirror)

        with caplog.at_level(logging.WARNING, logger="modules.mirror.sync"):
            updated = await service.review(1, "approved")

        assert updated.status == VerificationStatus.APPROVED
        assert store.verifications.get(1).status == VerificationStatus.APPROVED
        assert raising_mirror.operations() == ["push_verification"]
        record = next(r for r in caplog.records if r.name == "modules.mirror.sync")
        assert record.operation == "push_verification"
        assert record.key == "1"

    @pytest.mark.asyncio
    async def test_failing_mirror_does_not_block_review(self, service_with, failing_mirror, store):
        service = service_with(failing_mirror)
        await service.review(1, "rejected")
        assert store.verifications.get(1).status == VerificationStatus.REJECTED


class TestBulkReview:
    @pytest.mark.asyncio
    async def test_unknown_ids_are_skipped(self, verification_service, store):
        result = await verification_service.bulk_review([1, 999], "approve")

        assert result.count == 1
        assert result.skipped == [999]
        assert [request.id for request in result.updated] == [1]
        assert store.verifications.get(1).status == VerificationStatus.APPROVED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action,expected", [
        ("approve", VerificationStatus.APPROVED),
        ("approved", VerificationStatus.APPROVED),
        ("reject", VerificationStatus.REJECTED),
        ("rejected", VerificationStatus.REJECTED),
    ])
    async def test_accepts_verbs_and_statuses(self, verification_service, action, expected):
        result = await verification_service.bulk_review([1, 2, 3], action, notes="batch")
        assert result.count == 3
        assert all(request.status == expected for request in result.updated)
        assert all(request.notes == "batch" for request in result.updated)

    @pytest.mark.asyncio
    async def test_invalid_action(self, verification_service, store):
        with pytest.raises(InvalidBulkActionError):
            await verification_service.bulk_review([1], "delete")
        assert store.verifications.get(1).status == VerificationStatus.PENDING

    @pytest.mark.asyncio
    async def test_mirror_failures_do_not_abort_batch(self, service_with, raising_mirror):
        service = service_with(raising_mirror)
        result = await service.bulk_review([1, 2, 3], "reject")
        assert result.count == 3
        assert raising_mirror.operations() == ["push_verification"] * 3


class TestQueries:
    @pytest.mark.asyncio
    async def test_get_verification(self, verification_service):
        request = await verification_service.get_verification(1)
        assert request.full_name == "Sarah Johnson"

    @pytest.mark.asyncio
    async def test_get_unknown(self, verification_service):
        with pytest.raises(VerificationNotFoundError):
            await verification_service.get_verification(999)

    @pytest.mark.asyncio
    async def test_list_without_filter_is_newest_first(self, verification_service):
        requests = await verification_service.list_verifications()
        assert [request.full_name for request in requests] == [
            "Sarah Johnson",
            "Michael Chen",
            "Priya Sharma",
        ]

    @pytest.mark.asyncio
    async def test_list_with_filter(self, verification_service):
        await verification_service.review(2, "approved")
        approved = await verification_service.list_verifications("approved")
        assert [request.id for request in approved] == [2]

    @pytest.mark.asyncio
    async def test_list_with_unknown_filter(self, verification_service):
        with pytest.raises(InvalidVerificationStatusError):
            await verification_service.list_verifications("archived")

    @pytest.mark.asyncio
    async def test_list_pending(self, verification_service):
        await verification_service.review(1, "approved")
        pending = await verification_service.list_pending()
        assert [request.id for request in pending] == [2, 3]
