"""
Exports module exceptions.
"""

from shared.exceptions import ValidationError


class UnsupportedExportTypeError(ValidationError):
    """Raised when the requested collection cannot be exported."""

    def __init__(self, export_type: str, supported: list[str]):
        super().__init__(
            f"Invalid export type. Must be one of: {', '.join(supported)}",
            code="INVALID_EXPORT_TYPE",
            details={"field": "type", "type": export_type},
        )


class UnsupportedExportFormatError(ValidationError):
    """Raised when the requested file format is unknown."""

    def __init__(self, export_format: str):
        super().__init__(
            "Invalid export format. Must be 'csv' or 'json'",
            code="INVALID_EXPORT_FORMAT",
            details={"field": "format", "format": export_format},
        )
