"""
Signal Aggregator

Reduces every signal from every detector to one score:

    overall_impact = sum(magnitude * confidence / 100), one decimal
    raw_impact     = the same sum unrounded, used for recommendation tiers
    confidence     = mean(confidence), whole number (70 with no signals)

Confidence acts as a trust discount on each signal's magnitude. There is
no normalization, clipping or per-category weighting; detectors keep
their own scales comparable.
"""

from dataclasses import dataclass
from typing import Iterable

from fantasy_edge.schemas import EdgeSignal
from fantasy_edge.utils.rounding import round_half_up, round_to

BASELINE_CONFIDENCE = 70


@dataclass(frozen=True)
class Aggregate:
    overall_impact: float
    raw_impact: float
    confidence: int


def aggregate(signals: Iterable[EdgeSignal]) -> Aggregate:
    """Confidence-weighted sum of magnitudes plus mean confidence."""
    signals = list(signals)
    if not signals:
        return Aggregate(overall_impact=0.0, raw_impact=0.0, confidence=BASELINE_CONFIDENCE)

    weighted = sum(s.magnitude * s.confidence / 100 for s in signals)
    mean_confidence = sum(s.confidence for s in signals) / len(signals)

    return Aggregate(
        overall_impact=round_to(weighted, 1),
        raw_impact=weighted,
        confidence=round_half_up(mean_confidence),
    )
