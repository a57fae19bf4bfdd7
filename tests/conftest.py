"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from statsproxy.config import Settings
from statsproxy.services.cache import TTLCache
from statsproxy.services.stats_service import StatsService

TODAY = "2024-01-15"


@pytest.fixture
def schedule_payload() -> dict:
    """A one-day schedule with a live and a future game."""
    return {
        "gameWeek": [
            {
                "date": TODAY,
                "dayAbbrev": "MON",
                "numberOfGames": 2,
                "games": [
                    {
                        "id": 2023020456,
                        "season": 20232024,
                        "gameType": 2,
                        "gameState": "LIVE",
                        "startTimeUTC": "2024-01-16T00:00:00Z",
                        "awayTeam": {"id": 8, "abbrev": "MTL", "score": 2},
                        "homeTeam": {"id": 9, "abbrev": "OTT", "score": 3},
                        "clock": {"timeRemaining": "12:34", "running": True, "inIntermission": False},
                    },
                    {
                        "id": 2023020457,
                        "gameState": "FUT",
                        "awayTeam": {"id": 6, "abbrev": "BOS", "placeName": {"default": "Boston"}},
                        "homeTeam": {"id": 10, "abbrev": "TOR", "placeName": {"default": "Toronto"}},
                    },
                ],
            }
        ]
    }


@pytest.fixture
def game_payload() -> dict:
    return {
        "id": 2023020789,
        "season": 20232024,
        "gameType": 2,
        "gameState": "FINAL",
        "awayTeam": {"id": 3, "abbrev": "NYR", "placeName": {"default": "New York"}, "score": 4},
        "homeTeam": {"id": 1, "abbrev": "NJD", "placeName": {"default": "New Jersey"}, "score": 2},
        "periodDescriptor": {"number": 3, "periodType": "REG"},
    }


@pytest.fixture
def standings_payload() -> dict:
    return {
        "standings": [
            _standing("BOS", "Boston", "Bruins", "Eastern", "Atlantic", wins=30, points=65),
            _standing("TOR", "Toronto", "Maple Leafs", "Eastern", "Atlantic", wins=25, points=56),
            _standing("VGK", "Vegas", "Golden Knights", "Western", "Pacific", wins=27, points=58),
        ]
    }


@pytest.fixture
def player_payload() -> dict:
    return {
        "playerId": 8478402,
        "firstName": {"default": "Connor"},
        "lastName": {"default": "McDavid"},
        "sweaterNumber": 97,
        "positionCode": "C",
        "currentTeamAbbrev": "EDM",
        "featuredStats": {
            "season": 20232024,
            "regularSeason": {"subSeason": {"gamesPlayed": 45, "goals": 30, "assists": 50}},
        },
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(nhl_api_base="https://nhl.test/v1")


@pytest.fixture
def cache():
    cache = TTLCache()
    yield cache
    cache.destroy()


@pytest.fixture
def stats_service(settings, cache) -> StatsService:
    return StatsService(
        settings=settings,
        client=AsyncMock(),
        cache=cache,
        today=lambda: TODAY,
        espn_client=AsyncMock(),
    )


def _standing(
    abbrev: str, place: str, name: str,
    conference: str, division: str,
    wins: int, points: int,
) -> dict:
    return {
        "teamName": {"default": name},
        "teamCommonName": {"default": name},
        "teamAbbrev": {"default": abbrev},
        "placeName": {"default": place},
        "teamLogo": f"https://assets.nhle.com/logos/nhl/svg/{abbrev}_light.svg",
        "conferenceName": conference,
        "divisionName": division,
        "gamesPlayed": 45,
        "wins": wins,
        "losses": 10,
        "otLosses": 5,
        "points": points,
    }
