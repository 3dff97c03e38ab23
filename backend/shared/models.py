"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """
    Base model for everything that crosses the HTTP boundary.

    Fields are declared in snake_case and exchanged in camelCase
    (``full_name`` <-> ``fullName``). Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Standard success envelope: ``{success, message, data}``."""

    success: bool = Field(default=True, description="Always true for successful calls")
    message: Optional[str] = Field(None, description="Human-readable outcome")
    data: T
