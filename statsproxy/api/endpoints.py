"""Typed fetch functions for the NHL API."""

from __future__ import annotations

from statsproxy.api.client import APIClient
from statsproxy.api.models import Game, Player, Schedule, Standings


async def fetch_schedule(client: APIClient, date: str) -> Schedule:
    """Fetch the schedule week starting at ``date`` (YYYY-MM-DD)."""
    data = await client.get(f"/schedule/{date}")
    return Schedule(**data)


async def fetch_game(client: APIClient, game_id: str) -> Game:
    data = await client.get(f"/gamecenter/{game_id}/landing")
    return Game(**data)


async def fetch_standings(client: APIClient, date: str) -> Standings:
    """Fetch league standings as of ``date``."""
    data = await client.get(f"/standings/{date}")
    return Standings(**data)


async def fetch_player(client: APIClient, player_id: str) -> Player:
    data = await client.get(f"/player/{player_id}/landing")
    return Player(**data)
