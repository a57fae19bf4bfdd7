"""Static catalog of the sports served through ESPN."""

from __future__ import annotations

from statsproxy.api.models import SportConfig

SPORTS: dict[str, SportConfig] = {
    "nfl": SportConfig(
        name="NFL Football", short_name="NFL", sport="football", league="nfl",
        icon="🏈", category="pro", type="team", has_teams=True,
    ),
    "nba": SportConfig(
        name="NBA Basketball", short_name="NBA", sport="basketball", league="nba",
        icon="🏀", category="pro", type="team", has_teams=True,
    ),
    "mlb": SportConfig(
        name="MLB Baseball", short_name="MLB", sport="baseball", league="mlb",
        icon="⚾", category="pro", type="team", has_teams=True,
    ),
    "nhl": SportConfig(
        name="NHL Hockey", short_name="NHL", sport="hockey", league="nhl",
        icon="🏒", category="pro", type="team", has_teams=True,
    ),
    "mls": SportConfig(
        name="MLS Soccer", short_name="MLS", sport="soccer", league="usa.1",
        icon="⚽", category="pro", type="team", has_teams=True,
    ),
    "pga": SportConfig(
        name="PGA Golf", short_name="PGA", sport="golf", league="pga",
        icon="⛳", category="individual", type="individual", has_teams=False,
    ),
    "ncaaf": SportConfig(
        name="College Football", short_name="NCAAF", sport="football",
        league="college-football",
        icon="🏈", category="college", type="team", has_teams=True,
    ),
    "ncaab": SportConfig(
        name="College Basketball", short_name="NCAAB", sport="basketball",
        league="mens-college-basketball",
        icon="🏀", category="college", type="team", has_teams=True,
    ),
}


def filter_sports(category: str | None = None, type: str | None = None) -> list[dict]:
    """Catalog entries, optionally narrowed by category and/or type."""
    return [
        config.describe(sport_id)
        for sport_id, config in SPORTS.items()
        if (not category or config.category == category)
        and (not type or config.type == type)
    ]
