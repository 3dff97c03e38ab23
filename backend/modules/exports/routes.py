"""
Export API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from api.dependencies import get_export_service

from .service import ExportService

router = APIRouter()


@router.get("/export/{export_type}")
async def export_collection(
    export_type: str,
    export_format: str = Query(default="csv", alias="format", description="csv or json"),
    service: ExportService = Depends(get_export_service),
) -> Response:
    """
    Download a collection as an attachment.

    Types: verifications, posts, moderation-logs, users.
    """
    export = service.export(export_type, export_format)
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
