"""Request-scoped dependencies."""

from __future__ import annotations

from fastapi import Request

from statsproxy.services.stats_service import StatsService


def get_stats_service(request: Request) -> StatsService:
    return request.app.state.stats_service
