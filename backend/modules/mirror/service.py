"""
Directory service: the mirror calls whose result the caller needs.

Unlike lifecycle pushes, a failed upload, chat read or connection check is
reported to the caller.
"""

import logging
from typing import Optional

from modules.users.service import UserService
from shared.config import Settings
from .exceptions import (
    ChatReadError,
    DocumentUploadError,
    InvalidDocumentError,
    MirrorConnectionError,
    MissingUploadFieldError,
)
from .interfaces import IDirectoryMirror
from .models import ChatSnapshot, MirrorMode, MirrorResult

logger = logging.getLogger(__name__)


class DirectoryService:
    """ID document uploads, chat monitoring and connection checks."""

    def __init__(
        self,
        mirror: IDirectoryMirror,
        settings: Settings,
        users: Optional[UserService] = None,
    ):
        self._mirror = mirror
        self._max_upload_bytes = settings.max_upload_bytes
        self._users = users

    @property
    def mode(self) -> MirrorMode:
        return self._mirror.mode

    async def upload_id_document(
        self,
        user_id: Optional[str],
        content: Optional[bytes],
        filename: Optional[str],
        content_type: Optional[str],
    ) -> str:
        """
        Store a student ID document and return its URL.

        Raises:
            MissingUploadFieldError: If the file or the user id is missing
            InvalidDocumentError: If the file is not an image or too large
            DocumentUploadError: If the mirror could not store it
        """
        if content is None or not filename:
            raise MissingUploadFieldError("No file uploaded", field="idDocument")
        if not user_id:
            raise MissingUploadFieldError("User ID is required", field="userId")
        if not (content_type or "").startswith("image/"):
            raise InvalidDocumentError(
                "Only image files are allowed",
                content_type=content_type,
            )
        if len(content) > self._max_upload_bytes:
            raise InvalidDocumentError(
                f"File too large. Max size: {self._max_upload_bytes / 1024 / 1024:.1f}MB",
                size=len(content),
            )

        try:
            result = await self._mirror.upload_document(user_id, content, filename, content_type)
        except Exception as e:
            logger.exception(f"ID document upload for user {user_id} raised")
            raise DocumentUploadError(user_id, str(e))
        if not result.success or not result.url:
            raise DocumentUploadError(user_id, result.error or "no URL returned")

        if self._users is not None:
            await self._users.record_id_upload(user_id, result.url)

        logger.info(f"ID document uploaded for user {user_id} ({len(content)} bytes)")
        return result.url

    async def read_chat(self, chat_id: str) -> ChatSnapshot:
        """
        Raises:
            ChatReadError: If the chat could not be read
        """
        try:
            result = await self._mirror.read_chat(chat_id)
        except Exception as e:
            logger.exception(f"Reading chat {chat_id} raised")
            raise ChatReadError(chat_id, str(e))
        if not result.success:
            raise ChatReadError(chat_id, result.error or "unknown error")
        return result.chat or ChatSnapshot()

    async def check_connection(self) -> MirrorResult:
        """
        Raises:
            MirrorConnectionError: If the mirror is unreachable
        """
        try:
            result = await self._mirror.check_connection()
        except Exception as e:
            raise MirrorConnectionError(str(e))
        if not result.success:
            raise MirrorConnectionError(result.error or "unknown error")
        return result
