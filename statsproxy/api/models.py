"""Pydantic models for NHL API responses.

Field names follow the upstream camelCase JSON through aliases.  Unknown
upstream fields are kept so a document serialised with ``dump()`` matches
what the API sent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UpstreamModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def dump(self) -> dict[str, Any]:
        """Serialise back to the upstream JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class LocalizedName(UpstreamModel):
    default: str = ""


class TeamInfo(UpstreamModel):
    id: int
    abbrev: str = ""
    place_name: LocalizedName | None = None
    logo: str | None = None
    score: int | None = None


class Game(UpstreamModel):
    id: int
    season: int | None = None
    game_type: int | None = None
    game_date: str | None = None
    game_state: str = ""
    start_time_utc: str | None = Field(default=None, alias="startTimeUTC")
    away_team: TeamInfo | None = None
    home_team: TeamInfo | None = None


class GameWeek(UpstreamModel):
    date: str
    day_abbrev: str = ""
    number_of_games: int = 0
    games: list[Game] = Field(default_factory=list)


class Schedule(UpstreamModel):
    game_week: list[GameWeek] = Field(default_factory=list)

    def games_on(self, date: str) -> list[Game]:
        for day in self.game_week:
            if day.date == date:
                return day.games
        return []


class TeamStanding(UpstreamModel):
    team_name: LocalizedName = Field(default_factory=LocalizedName)
    team_abbrev: LocalizedName = Field(default_factory=LocalizedName)
    place_name: LocalizedName = Field(default_factory=LocalizedName)
    team_logo: str = ""
    conference_name: str = ""
    division_name: str = ""
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    ot_losses: int = 0
    points: int = 0

    @property
    def abbreviation(self) -> str:
        return self.team_abbrev.default

    @property
    def full_name(self) -> str:
        return f"{self.place_name.default} {self.team_name.default}".strip()


class Standings(UpstreamModel):
    standings: list[TeamStanding] = Field(default_factory=list)


class Player(UpstreamModel):
    player_id: int | None = None
    first_name: LocalizedName | None = None
    last_name: LocalizedName | None = None
    position_code: str | None = None
    sweater_number: int | None = None
    current_team_abbrev: str | None = None


class TeamSummary(BaseModel):
    """Display-ready row for the team listing."""

    id: str
    name: str
    abbreviation: str
    conference: str
    division: str
    logo: str


class SportConfig(UpstreamModel):
    """One entry of the multi-sport catalog and where ESPN keeps its data."""

    name: str
    short_name: str
    sport: str
    league: str
    icon: str
    category: str  # pro, college or individual
    type: str  # team or individual
    has_teams: bool

    def describe(self, sport_id: str) -> dict[str, Any]:
        return {
            "id": sport_id,
            **self.model_dump(by_alias=True),
            "apiPath": {"sport": self.sport, "league": self.league},
        }


class SportTeam(UpstreamModel):
    """Display-ready row for a team of any ESPN-backed sport."""

    id: str
    sport_id: str
    name: str
    abbreviation: str = ""
    logo: str | None = None
    emoji: str = ""
    primary_color: str = ""
