"""Tests for the moderation service."""

import pytest

from modules.moderation.exceptions import (
    InvalidModerationActionError,
    InvalidPostStatusError,
    PostNotFoundError,
)
from modules.moderation.interfaces import IModerationService
from modules.moderation.models import (
    LogAction,
    ModerationAction,
    ModerationStatus,
    PostCreate,
    PostPriority,
)
from modules.moderation.service import ModerationService
from shared.exceptions import ConflictError


class TestProtocol:
    def test_implements_interface(self, moderation_service):
        assert isinstance(moderation_service, IModerationService)


class TestModeratePost:
    @pytest.mark.asyncio
    async def test_approve_flagged_post(self, moderation_service, store):
        original = store.posts.get(1)

        outcome = await moderation_service.moderate_post(1, "approve", reason="Fine after review")

        assert outcome.action == ModerationAction.APPROVE
        assert outcome.post.moderation_status == ModerationStatus.APPROVED
        assert outcome.post.updated_at > original.updated_at
        assert outcome.post.content == original.content
        assert outcome.post.flagged_by == original.flagged_by

    @pytest.mark.asyncio
    async def test_reject(self, moderation_service):
        outcome = await moderation_service.moderate_post(2, "reject")
        assert outcome.post.moderation_status == ModerationStatus.REJECTED

    @pytest.mark.asyncio
    async def test_repeat_moderation_appends_two_entries(self, moderation_service, store):
        await moderation_service.moderate_post(1, "approve", reason="first")
        await moderation_service.moderate_post(1, "approve", reason="second")

        entries = store.moderation_logs.all()
        assert len(entries) == 2
        assert all(entry.post_id == 1 for entry in entries)
        assert all(entry.action == LogAction.APPROVE for entry in entries)
        assert [entry.reason for entry in entries] == ["first", "second"]
        assert store.posts.get(1).moderation_status == ModerationStatus.APPROVED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["approved", "flag", "", "APPROVE"])
    async def test_invalid_action(self, moderation_service, store, action):
        with pytest.raises(InvalidModerationActionError):
            await moderation_service.moderate_post(1, action)
        assert store.posts.get(1).moderation_status == ModerationStatus.FLAGGED
        assert store.moderation_logs.all() == []

    @pytest.mark.asyncio
    async def test_unknown_post(self, moderation_service, store, mirror):
        with pytest.raises(PostNotFoundError):
            await moderation_service.moderate_post(999, "approve")
        assert store.moderation_logs.all() == []
        assert mirror.calls == []

    @pytest.mark.asyncio
    async def test_stale_version(self, moderation_service):
        await moderation_service.moderate_post(1, "approve", expected_version=1)
        with pytest.raises(ConflictError):
            await moderation_service.moderate_post(1, "reject", expected_version=1)

    @pytest.mark.asyncio
    async def test_mirrors_decision(self, moderation_service, mirror):
        await moderation_service.moderate_post(2, "reject", reason="spam")
        assert mirror.calls == [("push_moderation", ("2", "reject", "spam"))]

    @pytest.mark.asyncio
    async def test_raising_mirror_does_not_block(self, store, raising_mirror):
        service = ModerationService(store.posts, store.moderation_logs, raising_mirror)

        outcome = await service.moderate_post(1, "reject")

        assert outcome.post.moderation_status == ModerationStatus.REJECTED
        assert store.posts.get(1).moderation_status == ModerationStatus.REJECTED
        assert len(store.moderation_logs) == 1


class TestQueries:
    @pytest.mark.asyncio
    async def test_list_flagged(self, moderation_service):
        posts = await moderation_service.list_flagged()
        assert [post.priority for post in posts] == [PostPriority.HIGH, PostPriority.MEDIUM]

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, moderation_service, store):
        created = store.posts.create(PostCreate(content="Fresh post", user_id=1))
        posts = await moderation_service.list_posts()
        assert [post.id for post in posts] == [created.id, 1, 2]

    @pytest.mark.asyncio
    async def test_list_posts_by_status(self, moderation_service):
        await moderation_service.moderate_post(2, "approve")
        posts = await moderation_service.list_posts("approved")
        assert [post.id for post in posts] == [2]

    @pytest.mark.asyncio
    async def test_list_posts_bad_status(self, moderation_service):
        with pytest.raises(InvalidPostStatusError):
            await moderation_service.list_posts("hidden")

    @pytest.mark.asyncio
    async def test_get_post(self, moderation_service):
        post = await moderation_service.get_post(2)
        assert post.flag_reason == "Spam"

    @pytest.mark.asyncio
    async def test_get_unknown_post(self, moderation_service):
        with pytest.raises(PostNotFoundError):
            await moderation_service.get_post(42)

    @pytest.mark.asyncio
    async def test_list_logs_filters_by_post(self, moderation_service):
        await moderation_service.moderate_post(1, "approve")
        await moderation_service.moderate_post(2, "reject")

        all_entries = await moderation_service.list_logs()
        post_two = await moderation_service.list_logs(post_id=2)

        assert len(all_entries) == 2
        assert [entry.post_id for entry in post_two] == [2]
