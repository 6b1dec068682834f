"""Tests for signal aggregation and half-up rounding."""

import itertools

import pytest

from fantasy_edge.core.aggregator import BASELINE_CONFIDENCE, aggregate
from fantasy_edge.schemas import Impact
from fantasy_edge.utils.rounding import round_half_up, round_to


class TestRounding:
    """Half-up rounding used for every score."""

    def test_round_half_up_ties_go_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2

    def test_round_half_up_non_ties(self) -> None:
        assert round_half_up(2.4) == 2
        assert round_half_up(-2.6) == -3

    def test_round_to_one_decimal(self) -> None:
        assert round_to(4.35) == 4.4
        assert round_to(-1.25) == -1.2
        assert round_to(3.0) == 3.0

    def test_round_to_absorbs_float_error(self) -> None:
        """0.1 + 0.2 style error must not flip a tie."""
        assert round_to(4.0 - 1.2 + 1.5) == 4.3


class TestAggregate:
    """Confidence-weighted sum and mean confidence."""

    def test_three_signal_scenario(self, make_signal) -> None:
        """5@80, -2@60, 3@50 -> 4.3 impact, 63 confidence."""
        signals = [make_signal(5, 80), make_signal(-2, 60), make_signal(3, 50)]
        result = aggregate(signals)
        assert result.overall_impact == 4.3
        assert result.confidence == 63

    def test_single_signal_exactness(self, make_signal) -> None:
        result = aggregate([make_signal(6, 50)])
        assert result.overall_impact == 3.0
        assert result.confidence == 50

    def test_empty_signals_default(self) -> None:
        result = aggregate([])
        assert result.overall_impact == 0
        assert result.confidence == BASELINE_CONFIDENCE == 70

    def test_order_independence(self, make_signal) -> None:
        """Every permutation of the signals gives the same aggregate."""
        signals = [make_signal(5, 80), make_signal(-2, 60), make_signal(3, 50), make_signal(-1.5, 75)]
        expected = aggregate(signals)
        for permutation in itertools.permutations(signals):
            result = aggregate(permutation)
            assert (result.overall_impact, result.confidence) == (expected.overall_impact, expected.confidence)

    def test_neutral_impact_with_magnitude_still_counts(self, make_signal) -> None:
        """Impact is informational; only magnitude drives the score."""
        signal = make_signal(1, 60, impact=Impact.NEUTRAL)
        assert aggregate([signal]).overall_impact == 0.6

    def test_accepts_generator(self, make_signal) -> None:
        result = aggregate(make_signal(m, 100) for m in (1, 2, 3))
        assert result.overall_impact == 6.0
        assert result.confidence == 100

    def test_confidence_rounds_half_up(self, make_signal) -> None:
        """mean(60, 61) = 60.5 -> 61."""
        result = aggregate([make_signal(1, 60), make_signal(1, 61)])
        assert result.confidence == 61

    def test_raw_impact_is_unrounded(self, make_signal) -> None:
        result = aggregate([make_signal(4, 99)])
        assert result.overall_impact == 4.0
        assert result.raw_impact == pytest.approx(3.96)
