"""Health check route."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from statsproxy.services.stats_service import StatsService
from statsproxy.web.deps import get_stats_service

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(service: StatsService = Depends(get_stats_service)) -> dict:
    """Lightweight readiness check, no upstream calls."""
    return {
        "status": "ok",
        "service": "Sports Stats API",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "cache_entries": len(service.cache),
    }
