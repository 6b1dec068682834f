"""End-to-end tests for EdgeAnalyzer and the text report."""

from datetime import datetime, timezone

import pytest

from fantasy_edge.core.analyzer import EdgeAnalyzer
from fantasy_edge.core.report import format_analysis, format_comparison, format_impact
from fantasy_edge.core.resolver import GameContextResolver
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.exceptions import NoScheduledGame, PlayerNotFound, ProviderError
from fantasy_edge.schemas import Impact, SignalType

# Week 14 of 2025, 1:00 PM ET
SUNDAY_KICKOFF = datetime(2025, 12, 7, 18, 0, tzinfo=timezone.utc)


class PerPlayerDetector(BaseDetector):
    """One signal per player id, sign decides the impact."""

    def __init__(self, category: str, magnitudes: dict, confidence: int = 80):
        self.category = category
        self.label = category.title()
        self.source = "test"
        self.magnitudes = magnitudes
        self.confidence = confidence

    def analyze(self, player, context, week):
        magnitude = self.magnitudes.get(player.id)
        if magnitude is None:
            return self.empty(f"{self.category} quiet")
        signal = self.signal(
            player, week, SignalType.MATCHUP_DEFENSE,
            Impact.POSITIVE if magnitude > 0 else Impact.NEGATIVE,
            magnitude=magnitude,
            confidence=self.confidence,
            short_description=f"{self.category} signal",
        )
        return self.result([signal], f"{self.category} fired")


class DownDetector(BaseDetector):
    category = "betting"
    label = "Betting"

    def analyze(self, player, context, week):
        raise ProviderError("odds-api", "401 Unauthorized")


@pytest.fixture
def resolver(directory, make_schedule, make_game) -> GameContextResolver:
    schedule = make_schedule({14: [
        make_game('KC', 'HOU', SUNDAY_KICKOFF),
        make_game('TB', 'ATL', SUNDAY_KICKOFF),
    ]})
    return GameContextResolver(directory, schedule)


@pytest.fixture
def analyzer(resolver) -> EdgeAnalyzer:
    return EdgeAnalyzer(resolver, [
        PerPlayerDetector('weather', {'4046': 5.0, '9509': -2.0}),
        PerPlayerDetector('betting', {'4046': 2.0}, confidence=60),
        PerPlayerDetector('travel', {}),
    ])


class TestAnalyzePlayer:

    def test_full_analysis(self, analyzer) -> None:
        analysis = analyzer.analyze_player("Patrick Mahomes")

        assert analysis.week == 14
        assert analysis.context.opponent == 'HOU'
        assert analysis.context.is_home is True
        assert list(analysis.summaries) == ['weather', 'betting', 'travel']
        assert analysis.summaries['travel'] == "travel quiet"
        assert analysis.labels == {'weather': 'Weather', 'betting': 'Betting', 'travel': 'Travel'}
        assert [s.short_description for s in analysis.signals] == ["weather signal", "betting signal"]
        # (5 x 80 + 2 x 60) / 100
        assert analysis.overall_impact == 5.2
        assert analysis.confidence == 70
        assert analysis.recommendation == "Strong environment for Patrick Mahomes. Start with confidence."
        assert [s.short_description for s in analysis.key_factors] == ["weather signal"]

    def test_away_player(self, analyzer) -> None:
        analysis = analyzer.analyze_player("Bijan Robinson", week=14)

        assert analysis.context.opponent == 'TB'
        assert analysis.context.is_home is False
        assert analysis.overall_impact == -1.6
        assert analysis.confidence == 80
        assert analysis.recommendation == (
            "Neutral environment for Bijan Robinson. Floor play - temper expectations."
        )

    def test_failed_detector_degrades(self, resolver) -> None:
        analyzer = EdgeAnalyzer(resolver, [PerPlayerDetector('weather', {'4046': 3.0}), DownDetector()])
        analysis = analyzer.analyze_player("Patrick Mahomes")

        assert analysis.summaries['betting'] == "Betting data unavailable (odds-api: 401 Unauthorized)"
        assert analysis.results['betting'].degraded
        assert analysis.overall_impact == 2.4

    def test_tiers_use_unrounded_impact(self, resolver) -> None:
        """4 x 99% is 3.96: reported as 4.0 but still below the strong tier."""
        analyzer = EdgeAnalyzer(resolver, [PerPlayerDetector('weather', {'4046': 4.0}, confidence=99)])
        analysis = analyzer.analyze_player("Patrick Mahomes")

        assert analysis.overall_impact == 4.0
        assert analysis.recommendation == "Favorable setup for Patrick Mahomes. Start with confidence."

    def test_negative_tiers_use_unrounded_impact(self, resolver) -> None:
        analyzer = EdgeAnalyzer(resolver, [PerPlayerDetector('weather', {'4046': -4.0}, confidence=99)])
        analysis = analyzer.analyze_player("Patrick Mahomes")

        assert analysis.overall_impact == -4.0
        assert analysis.recommendation == (
            "Neutral environment for Patrick Mahomes. Floor play - temper expectations."
        )

    def test_provider_outage_during_resolution(self, analyzer, monkeypatch) -> None:
        def down(identity, week=None):
            raise ProviderError("sleeper", "503 Service Unavailable")

        monkeypatch.setattr(analyzer.resolver, "resolve", down)
        with pytest.raises(ProviderError):
            analyzer.analyze_player("Patrick Mahomes")

    def test_unknown_player(self, analyzer) -> None:
        with pytest.raises(PlayerNotFound):
            analyzer.analyze_player("Nobody Special")

    def test_bye_week(self, analyzer) -> None:
        with pytest.raises(NoScheduledGame):
            analyzer.analyze_player("Patrick Mahomes", week=15)


class TestComparePlayers:

    def test_sorted_best_first(self, analyzer) -> None:
        ranked = analyzer.compare_players(["Bijan Robinson", "Patrick Mahomes"])
        assert [a.player.name for a in ranked] == ["Patrick Mahomes", "Bijan Robinson"]

    def test_unresolved_players_skipped(self, analyzer) -> None:
        ranked = analyzer.compare_players(["Nobody Special", "Free Agent Guy", "Bijan Robinson"])
        assert [a.player.name for a in ranked] == ["Bijan Robinson"]

    def test_provider_outage_skips_player(self, analyzer, monkeypatch) -> None:
        resolve = analyzer.resolver.resolve

        def flaky(identity, week=None):
            if identity == "Patrick Mahomes":
                raise ProviderError("espn", "connection refused")
            return resolve(identity, week)

        monkeypatch.setattr(analyzer.resolver, "resolve", flaky)
        ranked = analyzer.compare_players(["Patrick Mahomes", "Bijan Robinson"])
        assert [a.player.name for a in ranked] == ["Bijan Robinson"]

    def test_everyone_on_bye(self, analyzer) -> None:
        assert analyzer.compare_players(["Patrick Mahomes", "Travis Kelce"], week=15) == []


class TestReport:

    @pytest.mark.parametrize("value,text", [(4.3, "+4.3"), (-1.2, "-1.2"), (0.0, "0"), (3.0, "+3")])
    def test_format_impact(self, value, text) -> None:
        assert format_impact(value) == text

    def test_format_analysis(self, analyzer) -> None:
        report = format_analysis(analyzer.analyze_player("Patrick Mahomes"))
        lines = report.splitlines()

        assert "EDGE ANALYSIS: Patrick Mahomes (KC QB)" in lines
        assert "  ✓ Weather: weather fired" in lines
        assert "  ○ Travel: travel quiet" in lines
        assert "OVERALL IMPACT: +5.2" in lines
        assert "CONFIDENCE: 70%" in lines
        assert "  Strong environment for Patrick Mahomes. Start with confidence." in lines
        assert "KEY FACTORS:" in lines
        assert "  • weather signal" in lines
        assert "  • betting signal" not in lines

    def test_format_negative_analysis(self, analyzer) -> None:
        report = format_analysis(analyzer.analyze_player("Bijan Robinson"))

        assert "  ⚠️ Weather: weather fired" in report.splitlines()
        assert "OVERALL IMPACT: -1.6" in report
        assert "KEY FACTORS:" not in report

    def test_format_comparison(self, analyzer) -> None:
        report = format_comparison(analyzer.compare_players(["Bijan Robinson", "Patrick Mahomes"]))
        lines = report.splitlines()

        assert lines.index("Patrick Mahomes (KC QB)") < lines.index("Bijan Robinson (ATL RB)")
        assert "  Edge Score: +5.2 | Confidence: 70%" in lines
        assert "  Edge Score: -1.6 | Confidence: 80%" in lines
