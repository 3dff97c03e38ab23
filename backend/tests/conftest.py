"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from modules.mirror.models import ChatSnapshot, MirrorMode, MirrorResult
from modules.moderation.service import ModerationService
from modules.stats.service import StatsService
from modules.store import build_store
from modules.users.service import UserService
from modules.verifications.service import VerificationService
from shared.config import Settings


class RecordingMirror:
    """
    In-test IDirectoryMirror that records every call.

    Args:
        fail: Return failed results instead of successes
        raise_error: Raise from every call (a misbehaving adapter)
    """

    def __init__(self, fail: bool = False, raise_error: bool = False) -> None:
        self.fail = fail
        self.raise_error = raise_error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    @property
    def mode(self) -> MirrorMode:
        return MirrorMode.CONNECTED

    def _result(self, operation: str, *args: Any, **fields: Any) -> MirrorResult:
        self.calls.append((operation, args))
        if self.raise_error:
            raise RuntimeError("directory unreachable")
        if self.fail:
            return MirrorResult.failed(operation, self.mode, "directory unreachable")
        return MirrorResult.ok(operation, self.mode, **fields)

    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]

    async def push_verification(
        self, key: str, email: str, status: str, notes: Optional[str] = None
    ) -> MirrorResult:
        return self._result("push_verification", key, email, status, notes)

    async def push_moderation(
        self, post_id: str, action: str, reason: Optional[str] = None
    ) -> MirrorResult:
        return self._result("push_moderation", post_id, action, reason)

    async def upload_document(
        self, user_id: str, content: bytes, filename: str, content_type: str
    ) -> MirrorResult:
        return self._result(
            "upload_document",
            user_id,
            filename,
            url=f"https://files.test/id-documents/{user_id}/{filename}",
        )

    async def read_chat(self, chat_id: str) -> MirrorResult:
        chat = ChatSnapshot(messages=[{"id": 1, "text": "hi"}], participants=["a", "b"])
        return self._result("read_chat", chat_id, chat=chat)

    async def push_stats(self, stats: dict[str, Any]) -> MirrorResult:
        return self._result("push_stats", stats)

    async def check_connection(self) -> MirrorResult:
        return self._result("check_connection")


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        supabase_url="",
        supabase_service_role_key="",
        seed_sample_data=True,
        admin_identity="admin",
    )


@pytest.fixture
def store():
    """A freshly seeded store."""
    return build_store(seed=True)


@pytest.fixture
def empty_store():
    """A store without sample data."""
    return build_store(seed=False)


@pytest.fixture
def mirror() -> RecordingMirror:
    return RecordingMirror()


@pytest.fixture
def failing_mirror() -> RecordingMirror:
    return RecordingMirror(fail=True)


@pytest.fixture
def raising_mirror() -> RecordingMirror:
    return RecordingMirror(raise_error=True)


@pytest.fixture
def stats_service(store, mirror) -> StatsService:
    return StatsService(store.stats, mirror)


@pytest.fixture
def verification_service(store, mirror, stats_service) -> VerificationService:
    return VerificationService(
        repository=store.verifications,
        logs=store.moderation_logs,
        stats=stats_service,
        mirror=mirror,
        users=store.users,
        admin_identity="admin",
    )


@pytest.fixture
def moderation_service(store, mirror) -> ModerationService:
    return ModerationService(
        posts=store.posts,
        logs=store.moderation_logs,
        mirror=mirror,
        admin_identity="admin",
    )


@pytest.fixture
def user_service(store) -> UserService:
    return UserService(store.users)


@pytest.fixture
def container(settings, store, mirror) -> ServiceContainer:
    """A container wired to the test store and recording mirror."""
    return ServiceContainer(settings=settings, store=store, mirror=mirror)


@pytest.fixture
def app(container):
    """Create a fresh app for each test, bound to the test container."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
