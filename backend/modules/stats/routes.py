"""
Stats API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_stats_service
from shared.models import ApiResponse

from .interfaces import IStatsService
from .models import StatsPatch, SystemStats

router = APIRouter()


@router.get("/stats", response_model=ApiResponse[SystemStats])
async def get_stats(
    service: IStatsService = Depends(get_stats_service),
) -> ApiResponse[SystemStats]:
    """Dashboard counters as cached; not recomputed from the collections."""
    return ApiResponse(data=await service.get_stats())


@router.patch("/stats", response_model=ApiResponse[SystemStats])
async def patch_stats(
    patch: StatsPatch,
    service: IStatsService = Depends(get_stats_service),
) -> ApiResponse[SystemStats]:
    """Overwrite the given counters."""
    return ApiResponse(message="Stats updated", data=await service.patch_stats(patch))
