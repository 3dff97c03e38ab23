"""
Directory API endpoints: ID uploads, chat monitoring and connection checks.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from api.dependencies import get_directory_service
from shared.models import ApiResponse, CamelModel

from .models import ChatSnapshot, MirrorMode
from .service import DirectoryService

router = APIRouter()


class UploadResponse(CamelModel):
    success: bool = True
    message: str
    url: str


class ConnectionResponse(CamelModel):
    success: bool = True
    message: str
    mode: MirrorMode


@router.post("/upload-id", response_model=UploadResponse)
async def upload_id_document(
    id_document: Optional[UploadFile] = File(default=None, alias="idDocument"),
    user_id: Optional[str] = Form(default=None, alias="userId"),
    service: DirectoryService = Depends(get_directory_service),
) -> UploadResponse:
    """Upload a student ID image (image/*, 5MB max)."""
    content = await id_document.read() if id_document is not None else None
    url = await service.upload_id_document(
        user_id,
        content,
        id_document.filename if id_document is not None else None,
        id_document.content_type if id_document is not None else None,
    )
    return UploadResponse(message="ID document uploaded successfully", url=url)


@router.get("/chats/{chat_id}", response_model=ApiResponse[ChatSnapshot])
async def get_chat(
    chat_id: str,
    service: DirectoryService = Depends(get_directory_service),
) -> ApiResponse[ChatSnapshot]:
    return ApiResponse(data=await service.read_chat(chat_id))


@router.post("/test-mirror-connection", response_model=ConnectionResponse)
async def test_mirror_connection(
    service: DirectoryService = Depends(get_directory_service),
) -> ConnectionResponse:
    result = await service.check_connection()
    return ConnectionResponse(
        message=f"Directory mirror reachable ({result.mode.value} mode)",
        mode=result.mode,
    )
