"""
Mirror module exceptions.

Only raised by calls whose result the caller actually needs (uploads,
chat reads, connection checks). Lifecycle pushes never raise.
"""

from shared.exceptions import AdminConsoleError, ExternalServiceError, ValidationError


class MissingUploadFieldError(ValidationError):
    """Raised when the upload form lacks the file or the user id."""

    def __init__(self, message: str, field: str):
        super().__init__(message, code="MISSING_FIELD", details={"field": field})


class InvalidDocumentError(ValidationError):
    """Raised for an upload that is not an image or is too large."""

    def __init__(self, message: str, **details):
        super().__init__(message, code="INVALID_DOCUMENT", details={"field": "idDocument", **details})


class DocumentUploadError(AdminConsoleError):
    """Raised when the mirror could not store an ID document."""

    def __init__(self, user_id: str, error: str):
        super().__init__(
            "Failed to upload ID document",
            code="UPLOAD_FAILED",
            details={"user_id": user_id, "error": error},
        )


class ChatReadError(AdminConsoleError):
    """Raised when a chat could not be read from the mirror."""

    def __init__(self, chat_id: str, error: str):
        super().__init__(
            "Failed to fetch chat",
            code="CHAT_READ_FAILED",
            details={"chat_id": chat_id, "error": error},
        )


class MirrorConnectionError(ExternalServiceError):
    """Raised when the connection check against the mirror fails."""

    def __init__(self, error: str):
        super().__init__(
            f"Directory mirror connection failed: {error}",
            service="supabase",
            code="MIRROR_UNAVAILABLE",
        )
