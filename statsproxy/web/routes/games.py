"""Schedule, live score and game detail routes."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends

from statsproxy.errors import InvalidRequestError
from statsproxy.services.stats_service import StatsService
from statsproxy.web.deps import get_stats_service

router = APIRouter(prefix="/games", tags=["games"])

DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@router.get("")
async def list_games(
    date: str | None = None,
    service: StatsService = Depends(get_stats_service),
) -> dict:
    """Schedule for ``date``, or live scores for today when no date is given."""
    if date is None:
        schedule = await service.get_live_scores()
    else:
        if not DATE_RE.fullmatch(date):
            raise InvalidRequestError(
                "Invalid date format", "Date must be in YYYY-MM-DD format"
            )
        schedule = await service.get_schedule(date)
    return schedule.dump()


@router.get("/{game_id}")
async def get_game(
    game_id: str,
    service: StatsService = Depends(get_stats_service),
) -> dict:
    game = await service.get_game_by_id(game_id)
    return game.dump()
