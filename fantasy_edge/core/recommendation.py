"""
Recommendation Generator

Maps the aggregate score plus a few category flags to one sentence:

1. Headline by overall impact tier
2. Conditional clauses (OL downgrade, wind, shootout/blowout)
3. Closing call by overall impact tier, then by signal direction

Total: every input produces a string.
"""

from typing import Dict, List, Mapping

from fantasy_edge.edges.ol_injury_edge import ol_fantasy_impact
from fantasy_edge.schemas import DetectorResult, EdgeSignal, Impact, Player, SignalType

# Overall impact tiers
STRONG_IMPACT = 4
FAVORABLE_IMPACT = 1
SIGNIFICANT_CONCERN = -8
HEADWIND = -4
START_WITH_CONFIDENCE = 3
CONSIDER_ALTERNATIVES = -6
WIND_CLAUSE_MAGNITUDE = -3

WIND_SENSITIVE_POSITIONS = ('QB', 'WR')


def headline(name: str, overall_impact: float) -> str:
    if overall_impact >= STRONG_IMPACT:
        return f"Strong environment for {name}. "
    if overall_impact >= FAVORABLE_IMPACT:
        return f"Favorable setup for {name}. "
    if overall_impact <= SIGNIFICANT_CONCERN:
        return f"Significant concerns for {name}. "
    if overall_impact <= HEADWIND:
        return f"Some headwinds for {name}. "
    return f"Neutral environment for {name}. "


def closing(signals: List[EdgeSignal], overall_impact: float) -> str:
    if overall_impact >= START_WITH_CONFIDENCE:
        return "Start with confidence."
    if overall_impact <= CONSIDER_ALTERNATIVES:
        return "Consider alternatives if available."
    negatives = sum(1 for s in signals if s.impact == Impact.NEGATIVE)
    positives = sum(1 for s in signals if s.impact == Impact.POSITIVE)
    if negatives > positives:
        return "Floor play - temper expectations."
    return "Proceed as normal."


def recommend(
    player: Player,
    signals: List[EdgeSignal],
    overall_impact: float,
    results: Mapping[str, DetectorResult],
) -> str:
    """
    Build the recommendation sentence.

    Args:
        player: Player being analyzed
        signals: All signals from all detectors
        overall_impact: Unrounded aggregate score
        results: Detector results by category (reads 'ol_injury' and 'betting' flags)
    """
    position = player.position.value
    rec = headline(player.name, overall_impact)

    ol_result = results.get('ol_injury')
    if ol_result is not None:
        ol_impact: Dict[str, str] = ol_fantasy_impact(ol_result)
        if position == 'QB' and ol_impact['qb'] == 'downgrade':
            rec += "OL issues limit upside. "
        elif position == 'RB' and ol_impact['rb'] == 'downgrade':
            rec += "Running lanes compromised. "

    has_wind_issue = any(
        s.type == SignalType.WEATHER_WIND and s.magnitude <= WIND_CLAUSE_MAGNITUDE for s in signals
    )
    if has_wind_issue and position in WIND_SENSITIVE_POSITIONS:
        rec += "Wind limits deep ball upside. "

    betting = results.get('betting')
    if betting is not None:
        if betting.flags.get('is_shootout'):
            rec += "Shootout potential boosts ceiling. "
        elif betting.flags.get('is_blowout_risk'):
            rec += "Blowout risk may cap touches. "

    return rec + closing(signals, overall_impact)
