"""Multi-sport catalog routes backed by ESPN."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from statsproxy.errors import InvalidRequestError
from statsproxy.services.stats_service import StatsService
from statsproxy.web.deps import get_stats_service

router = APIRouter(prefix="/sports", tags=["sports"])


def _sport_not_found() -> JSONResponse:
    return JSONResponse({"error": "Sport not found"}, status_code=404)


@router.get("")
async def list_sports(
    category: str | None = None,
    type: str | None = None,
    service: StatsService = Depends(get_stats_service),
) -> dict:
    return {"sports": service.list_sports(category, type)}


@router.get("/{sport_id}")
async def get_sport(
    sport_id: str,
    service: StatsService = Depends(get_stats_service),
):
    config = service.get_sport(sport_id)
    if config is None:
        return _sport_not_found()
    return config.describe(sport_id)


@router.get("/{sport_id}/games")
async def get_sport_games(
    sport_id: str,
    service: StatsService = Depends(get_stats_service),
):
    scoreboard = await service.get_sport_scoreboard(sport_id)
    if scoreboard is None:
        return _sport_not_found()
    return {"sportId": sport_id, **scoreboard}


@router.get("/{sport_id}/teams")
async def get_sport_teams(
    sport_id: str,
    service: StatsService = Depends(get_stats_service),
):
    teams = await service.get_sport_teams(sport_id)
    if teams is None:
        return _sport_not_found()
    return {"sportId": sport_id, "teams": [t.dump() for t in teams]}


@router.get("/{sport_id}/teams/{team_id}")
async def get_sport_team_schedule(
    sport_id: str,
    team_id: str,
    service: StatsService = Depends(get_stats_service),
):
    schedule = await service.get_sport_team_schedule(sport_id, team_id)
    if schedule is None:
        return _sport_not_found()
    return schedule


@router.get("/{sport_id}/leaderboard")
async def get_sport_leaderboard(
    sport_id: str,
    service: StatsService = Depends(get_stats_service),
):
    config = service.get_sport(sport_id)
    if config is None:
        return _sport_not_found()
    if config.type == "team":
        raise InvalidRequestError(f"Leaderboard not available for team sport: {sport_id}")
    leaderboard = await service.get_sport_leaderboard(sport_id)
    return {"sportId": sport_id, **leaderboard}
