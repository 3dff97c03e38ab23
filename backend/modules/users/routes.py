"""
User management API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_user_service
from shared.models import ApiResponse

from .models import User, UserActionRequest
from .service import UserService

router = APIRouter()


@router.get("/users", response_model=ApiResponse[list[User]])
async def list_users(
    status: Optional[str] = Query(default=None, description="Filter by account status"),
    service: UserService = Depends(get_user_service),
) -> ApiResponse[list[User]]:
    return ApiResponse(data=await service.list_users(status))


@router.get("/users/{user_id}", response_model=ApiResponse[User])
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    return ApiResponse(data=await service.get_user(user_id))


@router.put("/users/{user_id}/action", response_model=ApiResponse[User])
async def apply_user_action(
    user_id: int,
    request: UserActionRequest,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Suspend, activate or approve an account."""
    user = await service.apply_action(user_id, request.action)
    return ApiResponse(message=f"User {request.action} applied", data=user)
