"""
Exports module.

CSV and JSON downloads of the store collections.
"""

from .exceptions import UnsupportedExportFormatError, UnsupportedExportTypeError

__all__ = [
    "UnsupportedExportFormatError",
    "UnsupportedExportTypeError",
]
