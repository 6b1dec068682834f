"""
Primetime Performance Edge

Some players elevate under the lights, others shrink. The slot is read
from the kickoff on the US Eastern clock:
- Thursday: TNF
- Saturday: SAT
- Monday: MNF
- Sunday at or after 19:00: SNF
"""

import logging
from datetime import datetime
from typing import Optional

from configs.edge_config import PRIMETIME_RULE, split_confidence, split_magnitude
from fantasy_edge.constants import to_eastern
from fantasy_edge.data.nflverse import NflverseClient
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

WEEKDAY_SLOTS = {3: 'TNF', 5: 'SAT', 0: 'MNF'}
SUNDAY = 6
SNF_START_HOUR = 19


def primetime_slot(kickoff: datetime) -> Optional[str]:
    """TNF / SNF / MNF / SAT, or None for a regular slot."""
    local = to_eastern(kickoff)
    weekday = local.weekday()
    if weekday in WEEKDAY_SLOTS:
        return WEEKDAY_SLOTS[weekday]
    if weekday == SUNDAY and local.hour >= SNF_START_HOUR:
        return 'SNF'
    return None


class PrimetimeDetector(BaseDetector):
    category = "primetime"
    label = "Primetime"
    source = "primetime-performance"

    def __init__(self, nflverse: NflverseClient):
        self.nflverse = nflverse

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        slot = primetime_slot(context.kickoff_time)
        if slot is None:
            return self.empty("Regular time slot", is_primetime=False, slot=None)

        splits = self.nflverse.get_primetime_splits(player.name)
        if splits is None or splits.regular_ppg <= 0:
            return self.empty(f"{slot} game - no historical data", is_primetime=True, slot=slot)

        diff = splits.primetime_ppg - splits.regular_ppg
        pct = diff / splits.regular_ppg * 100
        abs_pct = abs(pct)
        if abs_pct < PRIMETIME_RULE.min_pct:
            return self.empty(f"{slot} game - neutral history", is_primetime=True, slot=slot)

        favorable = diff > 0
        shown = round_half_up(abs_pct)
        signals = []
        if splits.primetime_games >= PRIMETIME_RULE.min_games:
            signals.append(self.signal(
                player, week, SignalType.PRIMETIME_PERFORMANCE,
                Impact.POSITIVE if favorable else Impact.NEGATIVE,
                magnitude=split_magnitude(PRIMETIME_RULE, abs_pct, favorable),
                confidence=split_confidence(PRIMETIME_RULE, splits.primetime_games),
                short_description=(f"Primetime star: +{shown}% in {slot} games" if favorable
                                   else f"Primetime fader: -{shown}% in {slot} games"),
                details=f"{player.name} averages {splits.primetime_ppg:.1f} PPG in primetime vs "
                        f"{splits.regular_ppg:.1f} PPG in regular slots, over "
                        f"{splits.primetime_games} primetime games. "
                        + ("Expect elevated production under the lights." if favorable
                           else "Historically struggles in primetime spots."),
            ))

        summary = f"{slot} {'star' if favorable else 'fader'}: {'+' if favorable else '-'}{shown}%"
        return self.result(signals, summary, is_primetime=True, slot=slot)
