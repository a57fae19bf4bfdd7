"""Orchestrator: read-through caching of NHL data per category."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, TypeVar

from statsproxy.api.client import APIClient
from statsproxy.api.espn import fetch_scoreboard, fetch_team_schedule, fetch_teams
from statsproxy.api.endpoints import (
    fetch_game,
    fetch_player,
    fetch_schedule,
    fetch_standings,
)
from statsproxy.api.models import (
    Game,
    Player,
    Schedule,
    SportConfig,
    SportTeam,
    Standings,
    TeamStanding,
    TeamSummary,
)
from statsproxy.config import Settings
from statsproxy.services.cache import TTLCache
from statsproxy.services.sports import SPORTS, filter_sports
from statsproxy.services.ttl import TTL, Category

log = logging.getLogger(__name__)

T = TypeVar("T")


def utc_today() -> str:
    """Current UTC calendar date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


class StatsService:
    """Checks the cache for each query and falls through to the NHL API on a miss.

    Upstream failures propagate untouched and are never cached, so the next
    call retries.  Concurrent misses on the same key are not coalesced: each
    caller fetches and the last write wins.
    """

    def __init__(
        self,
        settings: Settings,
        client: APIClient | None = None,
        cache: TTLCache | None = None,
        today: Callable[[], str] = utc_today,
        espn_client: APIClient | None = None,
    ) -> None:
        self.settings = settings
        if client is None:
            client = APIClient(
                settings.nhl_api_base, name="NHL", timeout=settings.request_timeout
            )
        if espn_client is None:
            espn_client = APIClient(
                settings.espn_api_base, name="ESPN", timeout=settings.request_timeout
            )
        self.client = client
        self.espn_client = espn_client
        # an empty TTLCache is falsy
        self.cache = cache if cache is not None else TTLCache()
        self._today = today

    async def close(self) -> None:
        await self.client.close()
        await self.espn_client.close()
        self.cache.destroy()

    async def _read_through(
        self,
        key: str,
        category: Category,
        fetch: Callable[[], Awaitable[T]],
    ) -> T:
        cached = self.cache.get(key)
        if cached is not None:
            log.debug("Cache hit %s", key)
            return cached

        log.debug("Cache miss %s", key)
        value = await fetch()
        self.cache.set(key, value, ttl=TTL[category])
        return value

    async def get_live_scores(self) -> Schedule:
        """Today's schedule under its own short-lived key."""
        today = self._today()
        return await self._read_through(
            f"live-scores:{today}",
            Category.LIVE_SCORES,
            lambda: fetch_schedule(self.client, today),
        )

    async def get_schedule(self, date: str) -> Schedule:
        return await self._read_through(
            f"schedule:{date}",
            Category.SCHEDULE,
            lambda: fetch_schedule(self.client, date),
        )

    async def get_game_by_id(self, game_id: str) -> Game:
        return await self._read_through(
            f"game:{game_id}",
            Category.GAME_DETAILS,
            lambda: fetch_game(self.client, game_id),
        )

    async def get_standings(self) -> Standings:
        """Standings as of today; a new day means a new key."""
        today = self._today()
        return await self._read_through(
            f"standings:{today}",
            Category.STANDINGS,
            lambda: fetch_standings(self.client, today),
        )

    async def get_player_stats(self, player_id: str) -> Player:
        return await self._read_through(
            f"player:{player_id}",
            Category.PLAYER_STATS,
            lambda: fetch_player(self.client, player_id),
        )

    async def get_team_stats(self, abbrev: str) -> TeamStanding | None:
        """Find one team in the current standings, or None if no team matches.

        Only the standings fetch is cached; the scan runs on every call.
        """
        standings = await self.get_standings()
        wanted = abbrev.lower()
        for team in standings.standings:
            if team.abbreviation.lower() == wanted:
                return team
        return None

    async def list_teams(self) -> list[TeamSummary]:
        standings = await self.get_standings()
        return [
            TeamSummary(
                id=team.abbreviation,
                name=team.full_name,
                abbreviation=team.abbreviation,
                conference=team.conference_name,
                division=team.division_name,
                logo=team.team_logo,
            )
            for team in standings.standings
        ]

    # -- multi-sport catalog (ESPN) --

    def list_sports(
        self, category: str | None = None, type: str | None = None
    ) -> list[dict[str, Any]]:
        return filter_sports(category, type)

    def get_sport(self, sport_id: str) -> SportConfig | None:
        return SPORTS.get(sport_id)

    async def get_sport_scoreboard(self, sport_id: str) -> dict[str, Any] | None:
        """Current scoreboard for a catalog sport, None for an unknown id."""
        config = self.get_sport(sport_id)
        if config is None:
            return None
        return await self._read_through(
            f"scoreboard:{sport_id}",
            Category.SCOREBOARD,
            lambda: fetch_scoreboard(self.espn_client, config),
        )

    async def get_sport_teams(self, sport_id: str) -> list[SportTeam] | None:
        """Teams of a catalog sport. Individual sports have none and skip the API."""
        config = self.get_sport(sport_id)
        if config is None:
            return None
        if not config.has_teams:
            return []
        return await self._read_through(
            f"sport-teams:{sport_id}",
            Category.SPORT_TEAMS,
            lambda: fetch_teams(self.espn_client, sport_id, config),
        )

    async def get_sport_team_schedule(
        self, sport_id: str, team_id: str
    ) -> dict[str, Any] | None:
        config = self.get_sport(sport_id)
        if config is None:
            return None
        return await self._read_through(
            f"team-schedule:{sport_id}:{team_id}",
            Category.TEAM_SCHEDULE,
            lambda: fetch_team_schedule(self.espn_client, config, team_id),
        )

    async def get_sport_leaderboard(self, sport_id: str) -> dict[str, Any] | None:
        """Event leaderboard of an individual sport.

        ESPN serves it from the scoreboard endpoint, so it shares that entry.
        Callers reject team sports before asking.
        """
        return await self.get_sport_scoreboard(sport_id)

    def force_refresh(self) -> None:
        """Drop every cached document so the next queries hit the API."""
        self.cache.clear()
