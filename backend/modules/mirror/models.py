"""
Mirror module data models.

The mirror is a secondary, non-authoritative copy of verification and
moderation state. Every adapter call returns a MirrorResult instead of
raising, so callers can treat failures uniformly.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from shared.models import CamelModel


class MirrorMode(str, Enum):
    """Which adapter is active."""

    CONNECTED = "connected"  # Real remote reads/writes
    DEMO = "demo"            # Simulated, nothing durable


class ChatSnapshot(CamelModel):
    """Messages and participants of a monitored chat."""

    messages: list[dict[str, Any]] = Field(default_factory=list)
    participants: list[str] = Field(default_factory=list)


class MirrorResult(BaseModel):
    """
    Uniform outcome of a mirror call.

    ``url`` is set by document uploads, ``chat`` by chat reads.
    """

    success: bool
    operation: str
    mode: MirrorMode
    error: Optional[str] = None
    url: Optional[str] = None
    chat: Optional[ChatSnapshot] = None

    @classmethod
    def ok(cls, operation: str, mode: MirrorMode, **fields: Any) -> "MirrorResult":
        return cls(success=True, operation=operation, mode=mode, **fields)

    @classmethod
    def failed(cls, operation: str, mode: MirrorMode, error: str) -> "MirrorResult":
        return cls(success=False, operation=operation, mode=mode, error=error)
