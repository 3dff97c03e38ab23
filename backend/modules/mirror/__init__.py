"""
Mirror module.

Best-effort copy of verification and moderation state in the external
directory (Supabase), plus ID document storage and chat reads.

Public API:
- IDirectoryMirror: Interface implemented by the connected and demo adapters
- create_directory_mirror: Picks the adapter for the current settings
- push_best_effort: Runs a mirror push without failing the caller
"""

from .interfaces import IDirectoryMirror
from .models import ChatSnapshot, MirrorMode, MirrorResult
from .exceptions import (
    ChatReadError,
    DocumentUploadError,
    InvalidDocumentError,
    MirrorConnectionError,
    MissingUploadFieldError,
)
from .factory import create_directory_mirror
from .sync import push_best_effort

__all__ = [
    # Interface
    "IDirectoryMirror",
    # Models
    "ChatSnapshot",
    "MirrorMode",
    "MirrorResult",
    # Exceptions
    "ChatReadError",
    "DocumentUploadError",
    "InvalidDocumentError",
    "MirrorConnectionError",
    "MissingUploadFieldError",
    # Helpers
    "create_directory_mirror",
    "push_best_effort",
]
