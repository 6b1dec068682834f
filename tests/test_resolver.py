"""Tests for game context resolution and the player/schedule services behind it."""

from datetime import datetime, timedelta, timezone

import pytest

from fantasy_edge.config import settings
from fantasy_edge.core.resolver import GameContextResolver
from fantasy_edge.data.players import PlayerDirectory
from fantasy_edge.data.schedule import days_between
from fantasy_edge.exceptions import NoScheduledGame, NoTeamAssigned, PlayerNotFound, ResolutionError

KICKOFF = datetime(2025, 12, 7, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def schedule(make_schedule, make_game):
    return make_schedule({
        13: [make_game('DAL', 'KC', KICKOFF - timedelta(days=10))],
        14: [make_game('KC', 'HOU', KICKOFF), make_game('ATL', 'TB', None)],
    })


class TestPlayerDirectory:
    """Identity matching."""

    def test_resolve_by_id(self, directory) -> None:
        assert directory.resolve("4046").name == "Patrick Mahomes"

    def test_resolve_by_exact_name(self, directory) -> None:
        assert directory.resolve("travis kelce").id == "4034"

    def test_resolve_by_partial_name(self, directory) -> None:
        assert directory.resolve("Mahomes").id == "4046"

    def test_suffixes_ignored(self, make_player) -> None:
        players = PlayerDirectory.from_players([make_player(name="Marvin Harrison Jr.", player_id="11")])
        assert players.resolve("Marvin Harrison").id == "11"

    def test_rostered_player_preferred(self, make_player) -> None:
        players = PlayerDirectory.from_players([
            make_player(name="Mike Williams", team=None, player_id="1", status="Inactive"),
            make_player(name="Mike Williams", team="PIT", player_id="2"),
        ])
        assert players.resolve("Mike Williams").id == "2"

    def test_unknown_returns_none(self, directory) -> None:
        assert directory.resolve("Nobody Atall") is None
        assert directory.resolve("") is None


class TestGameContextResolver:
    """Player -> team -> week -> game."""

    def test_resolves_home_game(self, directory, schedule) -> None:
        player, week, context = GameContextResolver(directory, schedule).resolve("Patrick Mahomes", 14)
        assert player.id == "4046"
        assert week == 14
        assert context.team == "KC"
        assert context.opponent == "HOU"
        assert context.is_home is True
        assert context.kickoff_time == KICKOFF

    def test_resolves_away_game(self, directory, schedule) -> None:
        _, _, context = GameContextResolver(directory, schedule).resolve("Travis Kelce", 13)
        assert context.opponent == "DAL"
        assert context.is_home is False
        assert context.home_team == "DAL"

    def test_defaults_to_current_week(self, directory, schedule) -> None:
        _, week, _ = GameContextResolver(directory, schedule).resolve("Patrick Mahomes")
        assert week == 14

    def test_current_week_setting_wins(self, directory, schedule, monkeypatch) -> None:
        monkeypatch.setattr(settings, "CURRENT_WEEK", 13)
        _, week, context = GameContextResolver(directory, schedule).resolve("Patrick Mahomes")
        assert week == 13
        assert context.opponent == "DAL"

    def test_player_not_found(self, directory, schedule) -> None:
        with pytest.raises(PlayerNotFound, match="Player not found: Nobody"):
            GameContextResolver(directory, schedule).resolve("Nobody")

    def test_no_team_assigned(self, directory, schedule) -> None:
        with pytest.raises(NoTeamAssigned, match="has no team"):
            GameContextResolver(directory, schedule).resolve("Free Agent Guy")

    def test_bye_week(self, directory, schedule) -> None:
        """Team absent from the week's schedule is on bye."""
        with pytest.raises(NoScheduledGame) as excinfo:
            GameContextResolver(directory, schedule).resolve("Patrick Mahomes", 12)
        assert excinfo.value.team == "KC"
        assert excinfo.value.week == 12
        assert isinstance(excinfo.value, ResolutionError)

    def test_invalid_week(self, directory, schedule) -> None:
        with pytest.raises(ValueError, match="Week 19 not allowed"):
            GameContextResolver(directory, schedule).resolve("Patrick Mahomes", 19)

    def test_missing_kickoff_uses_now(self, directory, schedule) -> None:
        before = datetime.now(timezone.utc)
        _, _, context = GameContextResolver(directory, schedule).resolve("Bijan Robinson", 14)
        assert context.opponent == "TB"
        assert context.kickoff_time >= before


class TestScheduleService:
    """Weekly schedule built from the scoreboard."""

    def test_both_teams_present(self, schedule) -> None:
        week = schedule.get_schedule(14)
        assert week['KC'].opponent == "HOU" and week['KC'].is_home
        assert week['HOU'].opponent == "KC" and not week['HOU'].is_home

    def test_schedule_is_cached(self, schedule) -> None:
        schedule.get_schedule(14)
        schedule.get_schedule(14)
        assert schedule.espn.week_requests == [14]

    def test_international_flag(self, make_schedule, make_game) -> None:
        service = make_schedule({9: [make_game('JAX', 'NYJ', KICKOFF, venue="Wembley", country="England")]})
        assert service.get_game('NYJ', 9).is_international

    def test_previous_game_skips_bye(self, schedule) -> None:
        previous = schedule.get_previous_game('KC', 16)
        assert previous is not None
        assert previous[0] == 14

    def test_rest_days(self, schedule) -> None:
        assert schedule.get_rest_days('KC', 14, KICKOFF) == 10
        # No earlier game on record
        assert schedule.get_rest_days('HOU', 14, KICKOFF) == 7

    def test_rest_days_capped_after_bye(self, make_schedule, make_game) -> None:
        service = make_schedule({
            10: [make_game('KC', 'DEN', KICKOFF - timedelta(days=21))],
            12: [make_game('KC', 'LV', KICKOFF)],
        })
        assert service.get_rest_days('KC', 12, KICKOFF) == 14

    def test_days_between_rounds_up(self) -> None:
        assert days_between(KICKOFF, KICKOFF + timedelta(days=3, hours=3)) == 4
        assert days_between(KICKOFF + timedelta(days=7), KICKOFF) == 7
