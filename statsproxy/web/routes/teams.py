"""Team listing and per-team standing routes."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from statsproxy.errors import InvalidRequestError
from statsproxy.services.stats_service import StatsService
from statsproxy.web.deps import get_stats_service

router = APIRouter(prefix="/teams", tags=["teams"])

TEAM_ID_RE = re.compile(r"[A-Za-z]{2,4}", re.ASCII)


@router.get("")
async def list_teams(service: StatsService = Depends(get_stats_service)) -> list[dict]:
    teams = await service.list_teams()
    return [t.model_dump() for t in teams]


@router.get("/{team_id}")
async def get_team(
    team_id: str,
    service: StatsService = Depends(get_stats_service),
):
    if not TEAM_ID_RE.fullmatch(team_id):
        raise InvalidRequestError(
            "Invalid team ID",
            "Team ID must be a 2-4 letter abbreviation (e.g., BOS, TOR, VGK)",
        )
    team = await service.get_team_stats(team_id)
    if team is None:
        return JSONResponse({"error": "Team not found"}, status_code=404)
    return team.dump()
