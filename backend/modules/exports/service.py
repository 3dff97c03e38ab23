"""
Export service.

Renders a store collection as CSV or JSON. CSV columns are the camelCase
field names in model order; list and set values are joined with ``;``
and missing values are empty cells.
"""

import csv
import io
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from modules.moderation.models import ModerationLogEntry, Post
from modules.store import DataStore
from modules.users.models import User
from modules.verifications.models import VerificationRequest
from .exceptions import UnsupportedExportFormatError, UnsupportedExportTypeError

logger = logging.getLogger(__name__)

EXPORT_FORMATS = {
    "csv": "text/csv",
    "json": "application/json",
}


@dataclass
class ExportFile:
    """A rendered export, ready to be sent as an attachment."""

    filename: str
    media_type: str
    content: str
    row_count: int


def _csv_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ";".join(sorted(str(item) for item in value))
    return str(value)


def render_csv(model: type[BaseModel], records: Sequence[BaseModel]) -> str:
    """Render records as CSV with a camelCase header row."""
    columns = [field.alias or to_camel(name) for name, field in model.model_fields.items()]
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(columns)
    for record in records:
        row = record.model_dump(mode="json", by_alias=True)
        writer.writerow([_csv_cell(row.get(column)) for column in columns])
    return buffer.getvalue()


def render_json(records: Sequence[BaseModel]) -> str:
    return json.dumps(
        [record.model_dump(mode="json", by_alias=True) for record in records],
        indent=2,
    )


class ExportService:
    """Exports store collections for offline review."""

    def __init__(self, store: DataStore):
        self._sources: dict[str, Callable[[], Sequence[BaseModel]]] = {
            "verifications": store.verifications.all,
            "posts": store.posts.all,
            "moderation-logs": store.moderation_logs.all,
            "users": store.users.all,
        }
        self._models: dict[str, type[BaseModel]] = {
            "verifications": VerificationRequest,
            "posts": Post,
            "moderation-logs": ModerationLogEntry,
            "users": User,
        }

    @property
    def export_types(self) -> list[str]:
        return list(self._sources)

    def export(self, export_type: str, export_format: str = "csv") -> ExportFile:
        """
        Render one collection in natural order.

        Raises:
            UnsupportedExportTypeError: If the collection is unknown
            UnsupportedExportFormatError: If the format is not csv or json
        """
        source = self._sources.get(export_type)
        if source is None:
            raise UnsupportedExportTypeError(export_type, self.export_types)
        media_type = EXPORT_FORMATS.get(export_format)
        if media_type is None:
            raise UnsupportedExportFormatError(export_format)

        records = source()
        if export_format == "csv":
            content = render_csv(self._models[export_type], records)
        else:
            content = render_json(records)

        logger.info(f"Exported {len(records)} {export_type} as {export_format}")
        return ExportFile(
            filename=f"{export_type}.{export_format}",
            media_type=media_type,
            content=content,
            row_count=len(records),
        )
