"""
Moderation API endpoints.

Provides the flagged-post queue, moderation decisions and the
moderation log.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_moderation_service
from shared.models import ApiResponse

from .interfaces import IModerationService
from .models import ModerateRequest, ModerationLogEntry, ModerationResponse, Post

router = APIRouter()


@router.get("/posts", response_model=ApiResponse[list[Post]])
async def list_posts(
    status: Optional[str] = Query(default=None, description="Filter by moderation status"),
    service: IModerationService = Depends(get_moderation_service),
) -> ApiResponse[list[Post]]:
    """
    List posts.

    Without a filter, all posts newest first.
    """
    return ApiResponse(data=await service.list_posts(status))


@router.get("/posts/flagged", response_model=ApiResponse[list[Post]])
async def list_flagged_posts(
    service: IModerationService = Depends(get_moderation_service),
) -> ApiResponse[list[Post]]:
    return ApiResponse(data=await service.list_flagged())


@router.get("/posts/{post_id}", response_model=ApiResponse[Post])
async def get_post(
    post_id: int,
    service: IModerationService = Depends(get_moderation_service),
) -> ApiResponse[Post]:
    return ApiResponse(data=await service.get_post(post_id))


@router.put("/posts/{post_id}/moderate", response_model=ModerationResponse)
async def moderate_post(
    post_id: int,
    request: ModerateRequest,
    service: IModerationService = Depends(get_moderation_service),
) -> ModerationResponse:
    """
    Approve or reject a post.

    A log entry is appended on every call, also when the post already
    had the requested status.
    """
    outcome = await service.moderate_post(
        post_id,
        request.action,
        reason=request.reason,
        expected_version=request.version,
    )
    return ModerationResponse(
        message=f"Post {outcome.action.resulting_status.value} successfully",
        data=outcome.post,
        action=outcome.action,
    )


@router.get("/moderation-logs", response_model=ApiResponse[list[ModerationLogEntry]])
async def list_moderation_logs(
    post_id: Optional[int] = Query(default=None, alias="postId", description="Only entries for this post"),
    service: IModerationService = Depends(get_moderation_service),
) -> ApiResponse[list[ModerationLogEntry]]:
    """List moderation log entries, newest first."""
    return ApiResponse(data=await service.list_logs(post_id))
