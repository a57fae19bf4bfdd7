"""League standings route."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from statsproxy.services.stats_service import StatsService
from statsproxy.web.deps import get_stats_service

router = APIRouter(tags=["standings"])


@router.get("/standings")
async def standings(service: StatsService = Depends(get_stats_service)) -> dict:
    result = await service.get_standings()
    return result.dump()
