"""
Demo directory mirror.

Used when no Supabase credentials are configured (or the client could not
be created). Writes nothing; logs what would have been mirrored and
returns deterministic data so the console stays usable.
"""

import logging
from typing import Any, Optional

from .models import ChatSnapshot, MirrorMode, MirrorResult

logger = logging.getLogger(__name__)

DEMO_PARTICIPANTS = ["user1", "user2"]


class DemoDirectoryMirror:
    """IDirectoryMirror implementation that simulates the remote store."""

    def __init__(self, storage_base_url: str) -> None:
        self._storage_base_url = storage_base_url.rstrip("/")

    @property
    def mode(self) -> MirrorMode:
        return MirrorMode.DEMO

    async def push_verification(
        self,
        key: str,
        email: str,
        status: str,
        notes: Optional[str] = None,
    ) -> MirrorResult:
        logger.info(f"Demo mode: student {key} verification {status} (not mirrored)")
        return MirrorResult.ok("push_verification", self.mode)

    async def push_moderation(
        self,
        post_id: str,
        action: str,
        reason: Optional[str] = None,
    ) -> MirrorResult:
        logger.info(f"Demo mode: post {post_id} action {action} (not mirrored)")
        return MirrorResult.ok("push_moderation", self.mode)

    async def upload_document(
        self,
        user_id: str,
        content: bytes,
        filename: str,
        content_type: str,
    ) -> MirrorResult:
        url = f"{self._storage_base_url}/id-documents/{user_id}/{filename}"
        logger.info(f"Demo mode: ID document upload simulated for user {user_id}")
        return MirrorResult.ok("upload_document", self.mode, url=url)

    async def read_chat(self, chat_id: str) -> MirrorResult:
        logger.info(f"Demo mode: chat monitoring for {chat_id}")
        chat = ChatSnapshot(
            messages=[
                {
                    "id": 1,
                    "chatId": chat_id,
                    "text": "Demo chat message",
                    "userId": DEMO_PARTICIPANTS[0],
                },
            ],
            participants=list(DEMO_PARTICIPANTS),
        )
        return MirrorResult.ok("read_chat", self.mode, chat=chat)

    async def push_stats(self, stats: dict[str, Any]) -> MirrorResult:
        logger.info("Demo mode: system stats update simulated")
        return MirrorResult.ok("push_stats", self.mode)

    async def check_connection(self) -> MirrorResult:
        return MirrorResult.ok("check_connection", self.mode)
