"""
Stats module data models.

SystemStats is a cache of dashboard counters, seeded at startup and
nudged by lifecycle transitions. It is never recomputed from the
underlying collections and can drift from them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shared.models import CamelModel


class SystemStats(CamelModel):
    """Singleton dashboard counters."""

    total_users: int = Field(default=0, ge=0)
    pending_verifications: int = Field(default=0, ge=0)
    active_chats: int = Field(default=0, ge=0)
    api_requests: int = Field(default=0, ge=0)
    updated_at: datetime


class StatsPatch(CamelModel):
    """Partial overwrite of the counters. Unset fields are left alone."""

    total_users: Optional[int] = Field(None, ge=0)
    pending_verifications: Optional[int] = Field(None, ge=0)
    active_chats: Optional[int] = Field(None, ge=0)
    api_requests: Optional[int] = Field(None, ge=0)

    def changes(self) -> dict[str, int]:
        """Only the fields the caller actually set."""
        return self.model_dump(exclude_none=True)


COUNTER_FIELDS = ("total_users", "pending_verifications", "active_chats", "api_requests")
