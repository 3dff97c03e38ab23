"""
Connected directory mirror backed by Supabase.

Mirrors verification and moderation decisions into Supabase tables,
stores ID documents in a storage bucket and reads monitored chats:
- verifications (one row per user, keyed by user id or request id)
- users (verification flags, uploaded ID)
- posts / moderation_logs
- system_stats (single "current" row)
- chats (jsonb messages and participants)

The Supabase client is synchronous, so every call runs in a worker thread
under a timeout. Errors never propagate: they become failed MirrorResults.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from supabase import Client

from shared.models import utc_now
from .models import ChatSnapshot, MirrorMode, MirrorResult

logger = logging.getLogger(__name__)


class SupabaseDirectoryMirror:
    """
    IDirectoryMirror implementation that writes to Supabase.

    Note: This adapter does NOT decide whether a failure matters.
    Lifecycle services treat every failed result as non-fatal.
    """

    def __init__(
        self,
        client: Client,
        admin_identity: str = "admin",
        bucket: str = "id-documents",
        timeout_seconds: float = 5.0,
        signed_url_ttl_seconds: int = 7 * 24 * 60 * 60,
    ) -> None:
        self._db = client
        self._admin_identity = admin_identity
        self._bucket = bucket
        self._timeout = timeout_seconds
        self._signed_url_ttl = signed_url_ttl_seconds

    @property
    def mode(self) -> MirrorMode:
        return MirrorMode.CONNECTED

    # -------------------------------------------------------------------------
    # Lifecycle pushes
    # -------------------------------------------------------------------------

    async def push_verification(
        self,
        key: str,
        email: str,
        status: str,
        notes: Optional[str] = None,
    ) -> MirrorResult:
        """Upsert the verification row and update the user's flags."""

        def write() -> None:
            now = utc_now().isoformat()
            self._db.table("verifications").upsert({
                "id": key,
                "email": email,
                "status": status,
                "notes": notes or "",
                "verified_at": now,
                "verified_by": self._admin_identity,
            }).execute()
            self._db.table("users").update({
                "verified": status == "approved",
                "verification_status": status,
                "updated_at": now,
            }).eq("id", key).execute()
            logger.info(f"Mirror: student {key} verification {status}")

        return await self._run("push_verification", write)

    async def push_moderation(
        self,
        post_id: str,
        action: str,
        reason: Optional[str] = None,
    ) -> MirrorResult:
        """Update the post's moderation fields and append a remote log row."""

        def write() -> None:
            now = utc_now().isoformat()
            self._db.table("posts").update({
                "moderation_status": "approved" if action == "approve" else "rejected",
                "moderated_at": now,
                "moderated_by": self._admin_identity,
                "moderation_reason": reason or "",
            }).eq("id", post_id).execute()
            self._db.table("moderation_logs").insert({
                "post_id": post_id,
                "action": action,
                "reason": reason or "",
                "moderator_id": self._admin_identity,
                "created_at": now,
            }).execute()
            logger.info(f"Mirror: post {post_id} moderation {action}")

        return await self._run("push_moderation", write)

    async def push_stats(self, stats: dict[str, Any]) -> MirrorResult:
        """Upsert the partial stats into the "current" row."""

        def write() -> None:
            self._db.table("system_stats").upsert({
                "id": "current",
                **stats,
                "updated_at": utc_now().isoformat(),
            }).execute()

        return await self._run("push_stats", write)

    # -------------------------------------------------------------------------
    # Documents and chats
    # -------------------------------------------------------------------------

    async def upload_document(
        self,
        user_id: str,
        content: bytes,
        filename: str,
        content_type: str,
    ) -> MirrorResult:
        """Upload to the storage bucket and return a signed URL."""

        def upload() -> dict[str, Any]:
            path = f"{user_id}/{filename}"
            bucket = self._db.storage.from_(self._bucket)
            bucket.upload(path, content, {"content-type": content_type, "upsert": "true"})
            signed = bucket.create_signed_url(path, self._signed_url_ttl)
            url = signed.get("signedURL") or signed.get("signedUrl")
            if not url:
                raise RuntimeError(f"No signed URL returned for {path}")

            self._db.table("users").update({
                "id_uploaded": True,
                "id_url": url,
                "updated_at": utc_now().isoformat(),
            }).eq("id", user_id).execute()
            logger.info(f"Mirror: ID document uploaded for user {user_id}")
            return {"url": url}

        return await self._run("upload_document", upload)

    async def read_chat(self, chat_id: str) -> MirrorResult:
        """Read a chat row; a missing chat yields an empty snapshot."""

        def read() -> dict[str, Any]:
            result = self._db.table("chats").select("*").eq("id", chat_id).execute()
            if not result.data:
                return {"chat": ChatSnapshot()}
            row = result.data[0]
            return {
                "chat": ChatSnapshot(
                    messages=row.get("messages") or [],
                    participants=row.get("participants") or [],
                )
            }

        return await self._run("read_chat", read)

    async def check_connection(self) -> MirrorResult:
        """Issue a trivial read against the stats table."""

        def ping() -> None:
            self._db.table("system_stats").select("id").limit(1).execute()

        return await self._run("check_connection", ping)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    async def _run(
        self,
        operation: str,
        call: Callable[[], Optional[dict[str, Any]]],
    ) -> MirrorResult:
        """Run a blocking Supabase call with a timeout, converting errors."""
        try:
            fields = await asyncio.wait_for(asyncio.to_thread(call), timeout=self._timeout)
        except asyncio.TimeoutError:
            return self._failure(operation, f"timed out after {self._timeout}s")
        except Exception as e:
            return self._failure(operation, str(e) or e.__class__.__name__)

        return MirrorResult.ok(operation, self.mode, **(fields or {}))

    def _failure(self, operation: str, error: str) -> MirrorResult:
        logger.warning(
            f"Mirror {operation} failed: {error}",
            extra={"operation": operation, "mode": self.mode.value, "error": error},
        )
        return MirrorResult.failed(operation, self.mode, error)
