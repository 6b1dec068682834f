"""Tests for the contract incentive, revenge game and division rivalry detectors."""

from fantasy_edge.edges.contract_incentive_edge import ContractIncentiveDetector, format_bonus
from fantasy_edge.edges.division_rivalry_edge import DivisionRivalryDetector
from fantasy_edge.edges.revenge_game_edge import RevengeGameDetector
from fantasy_edge.schemas import Impact


class TestContractIncentiveDetector:
    """Late-season bonus chases."""

    def test_format_bonus(self) -> None:
        assert format_bonus(1_000_000) == "$1.0M"
        assert format_bonus(625_000) == "$625K"

    def test_only_late_season(self, make_player, make_context) -> None:
        player = make_player(name="Rico Dowdle", position="RB", team="CAR", player_id="14657")
        result = ContractIncentiveDetector().analyze(player, make_context(team="CAR", opponent="TB"), 16)
        assert result.signals == []
        assert result.summary == "Contract incentives most relevant Weeks 17-18"

    def test_near_threshold_bonus(self, make_player, make_context) -> None:
        player = make_player(name="Rico Dowdle", position="RB", team="CAR", player_id="14657")
        result = ContractIncentiveDetector().analyze(player, make_context(team="CAR", opponent="TB"), 17)

        [signal] = result.signals
        # $1M -> 2, plus 1 for being within 5% of the threshold
        assert signal.magnitude == 3
        assert signal.confidence == 85
        assert signal.short_description == "INCENTIVE: $1.0M for 7 more scrimmage yards"
        assert "Also chasing $250K for touchdowns." in signal.details
        assert result.summary == "$1.0M: needs 7 scrimmage yards"

    def test_matches_by_id_when_name_differs(self, make_player, make_context) -> None:
        player = make_player(name="Hollywood Brown", position="WR", player_id="6870")
        [signal] = ContractIncentiveDetector().analyze(player, make_context(), 18).signals
        # Biggest achievable bonus wins: $750K for one touchdown
        assert signal.short_description == "INCENTIVE: $750K for 1 more touchdowns"
        assert signal.magnitude == 2

    def test_out_of_reach(self, make_player, make_context) -> None:
        player = make_player(name="Tony Pollard", position="RB", team="TEN", player_id="6151")
        result = ContractIncentiveDetector().analyze(player, make_context(team="TEN", opponent="JAX"), 17)
        assert result.summary == "Incentives likely out of reach"

    def test_no_incentives(self, make_player, make_context) -> None:
        result = ContractIncentiveDetector().analyze(make_player(), make_context(), 17)
        assert result.summary == "No verified contract incentives"


class TestRevengeGameDetector:
    """Facing a former team."""

    def test_bitter_first_year_revenge(self, make_player, make_context) -> None:
        player = make_player(name="Davante Adams", position="WR", team="NYJ")
        result = RevengeGameDetector().analyze(player, make_context(team="NYJ", opponent="LV"), 14)

        [signal] = result.signals
        assert signal.magnitude == 4
        assert signal.confidence == 80
        assert result.summary == "REVENGE GAME vs LV (bitter)"
        assert result.flags['is_revenge_game'] is True

    def test_amicable_revenge(self, make_player, make_context) -> None:
        player = make_player(name="Derrick Henry", position="RB", team="BAL")
        result = RevengeGameDetector().analyze(player, make_context(team="BAL", opponent="TEN"), 14)

        [signal] = result.signals
        assert signal.magnitude == 3
        assert signal.confidence == 75
        assert result.summary == "REVENGE GAME vs TEN"

    def test_not_this_week(self, make_player, make_context) -> None:
        player = make_player(name="Davante Adams", position="WR", team="NYJ")
        result = RevengeGameDetector().analyze(player, make_context(team="NYJ", opponent="MIA"), 14)
        assert result.signals == []
        assert result.summary == "Revenge game vs LV (not this week)"

    def test_no_narrative(self, make_player, make_context) -> None:
        assert RevengeGameDetector().analyze(make_player(), make_context(), 14).summary == "No revenge game narrative"


class TestDivisionRivalryDetector:
    """Informational division signal."""

    def test_intense_rivalry(self, make_player, make_context) -> None:
        result = DivisionRivalryDetector().analyze(make_player(), make_context(opponent="LV"), 14)

        [signal] = result.signals
        assert signal.impact == Impact.NEUTRAL
        assert signal.magnitude == 1
        assert signal.confidence == 60
        assert result.summary == "Rivalry game vs LV - high variance"

    def test_plain_division_game(self, make_player, make_context) -> None:
        result = DivisionRivalryDetector().analyze(make_player(), make_context(opponent="DEN"), 14)

        [signal] = result.signals
        assert signal.magnitude == 0
        assert signal.confidence == 50
        assert result.summary == "Division game vs DEN"

    def test_non_division(self, make_player, make_context) -> None:
        result = DivisionRivalryDetector().analyze(make_player(), make_context(opponent="HOU"), 14)
        assert result.signals == []
        assert result.summary == "Non-division game"
