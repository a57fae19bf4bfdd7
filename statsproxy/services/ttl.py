"""Cache lifetimes per data category, keyed by how fast the data changes."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    LIVE_SCORES = "live-scores"
    SCHEDULE = "schedule"
    STANDINGS = "standings"
    PLAYER_STATS = "player"
    GAME_DETAILS = "game"
    SCOREBOARD = "scoreboard"
    SPORT_TEAMS = "sport-teams"
    TEAM_SCHEDULE = "team-schedule"


# Seconds.
TTL: dict[Category, int] = {
    Category.LIVE_SCORES: 30,
    Category.SCHEDULE: 5 * 60,
    Category.STANDINGS: 5 * 60,
    Category.PLAYER_STATS: 10 * 60,
    Category.GAME_DETAILS: 30,  # may be live
    Category.SCOREBOARD: 30,
    Category.SPORT_TEAMS: 60 * 60,
    Category.TEAM_SCHEDULE: 5 * 60,
}
