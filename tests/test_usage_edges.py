"""Tests for the usage trend and red zone detectors."""

import pytest

from fantasy_edge.data.nflverse import UsageShare
from fantasy_edge.edges.red_zone_edge import RedZoneDetector, share_pct
from fantasy_edge.edges.usage_trend_edge import UsageTrendDetector
from fantasy_edge.schemas import Impact, SignalType


class TestUsageTrendDetector:
    """Target/carry share thresholds and trend."""

    @pytest.fixture
    def detector(self, nflverse) -> UsageTrendDetector:
        return UsageTrendDetector(nflverse)

    def test_not_applicable_positions(self, detector, make_player, make_context) -> None:
        assert detector.analyze(make_player(position="QB"), make_context(), 14).summary == "N/A for QBs"
        assert detector.analyze(make_player(position="K"), make_context(), 14).summary == "N/A for K"

    def test_no_data(self, detector, make_player, make_context) -> None:
        result = detector.analyze(make_player(position="WR"), make_context(), 14)
        assert result.signals == []
        assert result.summary == "Usage data unavailable"

    def test_elite_rising_target_share(self, detector, nflverse, make_player, make_context) -> None:
        nflverse.target_share = UsageShare(share=31.2, trend='up', weekly_shares=[28.0, 31.0, 34.6])
        result = detector.analyze(make_player(position="WR"), make_context(), 14)

        assert [(s.type, s.magnitude, s.confidence) for s in result.signals] == [
            (SignalType.USAGE_TARGET_SHARE, 4, 85),
            (SignalType.USAGE_TREND, 2, 70),
        ]
        assert result.summary == "Elite target share: 31.2%"
        assert result.flags['target_share'] == 31.2
        assert result.flags['target_share_trend'] == 'up'

    def test_strong_target_share(self, detector, nflverse, make_player, make_context) -> None:
        nflverse.target_share = UsageShare(share=26.0, trend='stable', weekly_shares=[26.0, 26.0])
        [signal] = detector.analyze(make_player(position="TE"), make_context(), 14).signals
        assert signal.magnitude == 2

    def test_low_target_share(self, detector, nflverse, make_player, make_context) -> None:
        nflverse.target_share = UsageShare(share=10.0, trend='stable', weekly_shares=[10.0, 10.0])
        result = detector.analyze(make_player(position="WR"), make_context(), 14)

        [signal] = result.signals
        assert signal.impact == Impact.NEGATIVE
        assert signal.magnitude == -2
        assert signal.confidence == 75
        assert result.summary == "Low target share: 10.0%"

    def test_rb_workhorse_losing_work(self, detector, nflverse, make_player, make_context) -> None:
        nflverse.carry_share = UsageShare(share=70.0, trend='down', weekly_shares=[80.0, 70.0, 60.0])
        result = detector.analyze(make_player(position="RB"), make_context(), 14)

        assert [s.magnitude for s in result.signals] == [2, -2]
        assert result.summary == "Mixed usage signals"

    def test_rb_stable_middle(self, detector, nflverse, make_player, make_context) -> None:
        nflverse.carry_share = UsageShare(share=50.0, trend='stable', weekly_shares=[50.0, 50.0])
        result = detector.analyze(make_player(position="RB"), make_context(), 14)
        assert result.signals == []
        assert result.summary == "Usage stable (50.0% carry share)"


class TestRedZoneDetector:
    """Red zone and goal line roles from the reference table."""

    def test_share_pct(self) -> None:
        assert share_pct(3.2, 8) == 40
        assert share_pct(1, 0) == 0

    def test_goal_line_back(self, make_player, make_context) -> None:
        player = make_player(name="Derrick Henry", position="RB", team="BAL")
        result = RedZoneDetector().analyze(player, make_context(team="BAL", opponent="PIT"), 14)

        [signal] = result.signals
        assert signal.type == SignalType.USAGE_REDZONE
        assert signal.magnitude == 4
        assert signal.confidence == 80
        assert result.summary == "Elite GL back: 86% goal line share"
        assert result.flags['has_elite_usage'] is True

    def test_red_zone_share_alone_is_elite(self, make_player, make_context) -> None:
        player = make_player(name="James Cook", position="RB", team="BUF")
        result = RedZoneDetector().analyze(player, make_context(team="BUF", opponent="MIA"), 14)
        [signal] = result.signals
        # 70% of RZ carries, 60% goal line
        assert signal.magnitude == 3

    def test_receiver_target_hog(self, make_player, make_context) -> None:
        player = make_player(name="Ja'Marr Chase", position="WR", team="CIN")
        result = RedZoneDetector().analyze(player, make_context(team="CIN", opponent="CLE"), 14)

        [signal] = result.signals
        assert signal.magnitude == 3
        assert signal.confidence == 75
        assert result.summary == "RZ target hog: 40% RZ targets"

    def test_solid_receiver_share(self, make_player, make_context) -> None:
        player = make_player(name="DeVonta Smith", position="WR", team="PHI")
        result = RedZoneDetector().analyze(player, make_context(team="PHI", opponent="DAL"), 14)

        [signal] = result.signals
        assert signal.magnitude == 1
        assert result.summary == "Solid RZ target share: 23%"

    def test_unknown_player(self, make_player, make_context) -> None:
        result = RedZoneDetector().analyze(make_player(), make_context(), 14)
        assert result.signals == []
        assert result.summary == "No red zone usage data available"
