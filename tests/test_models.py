"""Tests for NHL API models."""

from __future__ import annotations

from statsproxy.api.models import Game, Player, Schedule, Standings, TeamStanding


class TestSchedule:
    def test_games_on_known_date(self, schedule_payload):
        schedule = Schedule(**schedule_payload)
        games = schedule.games_on("2024-01-15")
        assert [g.id for g in games] == [2023020456, 2023020457]
        assert games[0].start_time_utc == "2024-01-16T00:00:00Z"

    def test_games_on_unknown_date(self, schedule_payload):
        assert Schedule(**schedule_payload).games_on("2024-01-16") == []

    def test_empty_schedule(self):
        schedule = Schedule(gameWeek=[])
        assert schedule.game_week == []
        assert schedule.dump() == {"gameWeek": []}


class TestGame:
    def test_unknown_fields_survive_dump(self, game_payload):
        game = Game(**game_payload)
        assert game.dump()["periodDescriptor"] == {"number": 3, "periodType": "REG"}

    def test_minimal_game(self):
        game = Game(id=1)
        assert game.game_state == ""
        assert game.home_team is None
        assert game.dump() == {"id": 1}


class TestTeamStanding:
    def test_abbreviation_and_full_name(self, standings_payload):
        team = TeamStanding(**standings_payload["standings"][2])
        assert team.abbreviation == "VGK"
        assert team.full_name == "Vegas Golden Knights"
        assert team.ot_losses == 5

    def test_defaults(self):
        team = TeamStanding()
        assert team.abbreviation == ""
        assert team.points == 0
        assert team.dump() == {}

    def test_empty_standings(self):
        assert Standings(standings=[]).standings == []


class TestPlayer:
    def test_player_fields(self, player_payload):
        player = Player(**player_payload)
        assert player.player_id == 8478402
        assert player.last_name.default == "McDavid"
        assert player.current_team_abbrev == "EDM"
        assert player.sweater_number == 97
