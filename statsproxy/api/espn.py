"""Fetch functions for the ESPN site API."""

from __future__ import annotations

from typing import Any

from statsproxy.api.client import APIClient
from statsproxy.api.models import SportConfig, SportTeam


def _league_path(config: SportConfig) -> str:
    return f"/{config.sport}/{config.league}"


async def fetch_scoreboard(client: APIClient, config: SportConfig) -> dict[str, Any]:
    return await client.get(f"{_league_path(config)}/scoreboard")


async def fetch_teams(
    client: APIClient, sport_id: str, config: SportConfig
) -> list[SportTeam]:
    """Fetch a league's teams and flatten them into ``SportTeam`` rows."""
    data = await client.get(f"{_league_path(config)}/teams")
    try:
        entries = data["sports"][0]["leagues"][0].get("teams") or []
    except (KeyError, IndexError, TypeError):
        entries = []

    teams = []
    for entry in entries:
        team = entry.get("team", {})
        logos = team.get("logos") or []
        color = team.get("color")
        teams.append(
            SportTeam(
                id=str(team.get("id", "")),
                sport_id=sport_id,
                name=team.get("displayName", ""),
                abbreviation=team.get("abbreviation", ""),
                logo=logos[0].get("href") if logos else None,
                emoji=config.icon,
                primary_color=f"#{color}" if color else "",
            )
        )
    return teams


async def fetch_team_schedule(
    client: APIClient, config: SportConfig, team_id: str
) -> dict[str, Any]:
    return await client.get(f"{_league_path(config)}/teams/{team_id}/schedule")
