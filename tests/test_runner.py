"""Tests for the detector registry and the fan-out runner."""

import threading
import time

import pytest

from fantasy_edge.core.aggregator import aggregate
from fantasy_edge.core.runner import DetectorRunner
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.edges.registry import DetectorRegistry, default_detectors
from fantasy_edge.exceptions import ProviderError
from fantasy_edge.schemas import Impact, SignalType

EXPECTED_CATEGORIES = [
    'weather', 'travel', 'ol_injury', 'betting', 'defense_matchup',
    'opposing_injuries', 'usage_trends', 'contract_incentive', 'revenge_game',
    'red_zone', 'home_away', 'primetime', 'division_rivalry', 'rest_advantage',
    'indoor_outdoor',
]


class StaticDetector(BaseDetector):
    """Emits one fixed signal, or none."""

    def __init__(self, category: str, magnitude=None, confidence: int = 80):
        self.category = category
        self.label = category.title()
        self.source = "test"
        self.magnitude = magnitude
        self.confidence = confidence

    def analyze(self, player, context, week):
        if self.magnitude is None:
            return self.empty(f"{self.category} quiet")
        signal = self.signal(
            player, week, SignalType.MATCHUP_DEFENSE, Impact.POSITIVE,
            magnitude=self.magnitude,
            confidence=self.confidence,
            short_description=f"{self.category} signal",
        )
        return self.result([signal], f"{self.category} fired")


class FailingDetector(BaseDetector):
    category = "weather"
    label = "Weather"

    def analyze(self, player, context, week):
        raise ProviderError("open-meteo", "connection refused")


class BlockingDetector(BaseDetector):

    def __init__(self, release: threading.Event, category: str = "betting"):
        self.release = release
        self.category = category
        self.label = category.title()

    def analyze(self, player, context, week):
        self.release.wait(5)
        return self.empty("too late")


class TestDetectorRegistry:
    """Ordered, category-keyed roster."""

    def test_default_roster_order(self, make_schedule, weather, espn, odds, sleeper, nflverse) -> None:
        detectors = default_detectors(
            schedule=make_schedule({}), weather=weather, espn=espn,
            odds=odds, sleeper=sleeper, nflverse=nflverse,
        )
        registry = DetectorRegistry(detectors)
        assert registry.categories == EXPECTED_CATEGORIES
        assert len(registry) == 15

    def test_labels(self, make_schedule, weather, espn, odds, sleeper, nflverse) -> None:
        registry = DetectorRegistry(default_detectors(
            schedule=make_schedule({}), weather=weather, espn=espn,
            odds=odds, sleeper=sleeper, nflverse=nflverse,
        ))
        assert registry.label('travel') == "Travel/Rest"
        assert registry.label('opposing_injuries') == "Opp D Injuries"
        assert registry.label('unknown') == "unknown"
        assert 'weather' in registry
        assert registry.get('nope') is None

    def test_duplicate_category_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            DetectorRegistry([StaticDetector('weather'), StaticDetector('weather')])

    def test_missing_category_rejected(self) -> None:
        with pytest.raises(ValueError):
            DetectorRegistry([StaticDetector('')])


class TestDetectorRunner:
    """Concurrent fan-out with failure isolation."""

    def test_results_follow_registry_order(self, make_player, make_context) -> None:
        detectors = [StaticDetector(c) for c in ('c', 'a', 'b')]
        results = DetectorRunner(detectors).run_all(make_player(), make_context(), 14)
        assert list(results) == ['c', 'a', 'b']
        assert all(not r.degraded for r in results.values())

    def test_failure_is_isolated(self, make_player, make_context) -> None:
        """One detector raising leaves every category present and the rest intact."""
        detectors = [FailingDetector()] + [StaticDetector(c, magnitude=2, confidence=50) for c in EXPECTED_CATEGORIES[1:]]
        results = DetectorRunner(detectors).run_all(make_player(), make_context(), 14)

        assert len(results) == 15
        weather = results['weather']
        assert weather.degraded
        assert weather.signals == []
        assert weather.summary == "Weather data unavailable (open-meteo: connection refused)"

        signals = [s for r in results.values() for s in r.signals]
        assert len(signals) == 14
        assert aggregate(signals).overall_impact == 14.0

    def test_timeout_degrades(self, make_player, make_context) -> None:
        release = threading.Event()
        try:
            runner = DetectorRunner([StaticDetector('weather', magnitude=1), BlockingDetector(release)], timeout=0.05)
            results = runner.run_all(make_player(), make_context(), 14)
        finally:
            release.set()

        assert results['betting'].degraded
        assert results['betting'].summary == "Betting timed out after 0.05s"
        assert not results['weather'].degraded
        assert len(results['weather'].signals) == 1

    def test_hung_detectors_share_one_deadline(self, make_player, make_context) -> None:
        """Four hung detectors cost one timeout, not four."""
        release = threading.Event()
        detectors = [BlockingDetector(release, category=c) for c in ('a', 'b', 'c', 'd')]
        try:
            runner = DetectorRunner(detectors, max_workers=4, timeout=0.5)
            started = time.monotonic()
            results = runner.run_all(make_player(), make_context(), 14)
            elapsed = time.monotonic() - started
        finally:
            release.set()

        assert all(r.degraded for r in results.values())
        assert elapsed < 1.0

    def test_signals_are_stamped(self, make_player, make_context) -> None:
        player = make_player(player_id="4046")
        results = DetectorRunner([StaticDetector('x', magnitude=3)]).run_all(player, make_context(), 9)
        signal = results['x'].signals[0]
        assert signal.subject_id == "4046"
        assert signal.week == 9
        assert signal.source == "test"

    def test_empty_roster(self, make_player, make_context) -> None:
        assert DetectorRunner([]).run_all(make_player(), make_context(), 14) == {}
