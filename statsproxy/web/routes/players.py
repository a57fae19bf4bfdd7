"""Player record route."""

from __future__ import annotations

import re

from fastapi import APIRouter, Depends

from statsproxy.errors import InvalidRequestError
from statsproxy.services.stats_service import StatsService
from statsproxy.web.deps import get_stats_service

router = APIRouter(prefix="/players", tags=["players"])

PLAYER_ID_RE = re.compile(r"[0-9]+", re.ASCII)


@router.get("/{player_id}")
async def get_player(
    player_id: str,
    service: StatsService = Depends(get_stats_service),
) -> dict:
    if not PLAYER_ID_RE.fullmatch(player_id):
        raise InvalidRequestError("Invalid player ID", "Player ID must be numeric")
    player = await service.get_player_stats(player_id)
    return player.dump()
