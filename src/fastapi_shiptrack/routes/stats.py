"""Analytics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_shiptrack.analytics import get_platform_stats
from fastapi_shiptrack.dependencies import get_state
from fastapi_shiptrack.schemas import PlatformStatsResponse

router = APIRouter()


@router.get("/stats", response_model=PlatformStatsResponse)
async def platform_stats(state=Depends(get_state)) -> PlatformStatsResponse:
    return PlatformStatsResponse.from_stats(get_platform_stats(state))
