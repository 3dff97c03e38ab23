"""
Shared infrastructure for the CampusBuzz admin backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory (external mirror)
- exceptions: Base exception classes
- repository: In-memory collection base class
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    AdminConsoleError,
    NotFoundError,
    ValidationError,
    ConflictError,
    ExternalServiceError,
)
from .models import ApiResponse, CamelModel, utc_now
from .repository import InMemoryRepository

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "AdminConsoleError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "ExternalServiceError",
    "ApiResponse",
    "CamelModel",
    "utc_now",
    "InMemoryRepository",
]
