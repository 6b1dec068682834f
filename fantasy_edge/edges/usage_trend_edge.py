"""
Usage Trends Edge

Target share and carry share over the last three weeks:
- Emerging players (usage increasing)
- Declining players (usage decreasing)
- Workload concerns (committee backs, low-volume receivers)

Target share is the strongest single predictor for WR/TE output;
carry share plus game script drives RB outcomes.
"""

import logging
from typing import Optional

from configs.edge_config import CARRY_SHARE_THRESHOLDS, TARGET_SHARE_THRESHOLDS, USAGE_LOOKBACK_WEEKS
from fantasy_edge.data.nflverse import NflverseClient, UsageShare
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType

logger = logging.getLogger(__name__)


def _weekly(usage: UsageShare, sep: str = ', ') -> str:
    return sep.join(f"{s:.1f}%" for s in usage.weekly_shares)


class UsageTrendDetector(BaseDetector):
    """Recent target/carry share and its direction (nflverse)."""

    category = "usage_trends"
    label = "Usage"
    source = "nflverse"

    def __init__(self, nflverse: NflverseClient):
        self.nflverse = nflverse

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        position = player.position.value
        if position == 'QB':
            return self.empty("N/A for QBs")
        if position in ('K', 'DEF'):
            return self.empty(f"N/A for {position}")

        targets: Optional[UsageShare] = None
        carries: Optional[UsageShare] = None
        if position in ('WR', 'TE'):
            targets = self.nflverse.get_target_share(player.name, USAGE_LOOKBACK_WEEKS)
        elif position == 'RB':
            carries = self.nflverse.get_carry_share(player.name, USAGE_LOOKBACK_WEEKS)
            targets = self.nflverse.get_target_share(player.name, USAGE_LOOKBACK_WEEKS)

        if targets is None and carries is None:
            return self.empty("Usage data unavailable")

        signals = []

        if position in ('WR', 'TE') and targets is not None:
            share = targets.share
            if share >= TARGET_SHARE_THRESHOLDS.strong:
                signals.append(self.signal(
                    player, week, SignalType.USAGE_TARGET_SHARE, Impact.POSITIVE,
                    magnitude=4 if share >= TARGET_SHARE_THRESHOLDS.elite else 2,
                    confidence=85,
                    short_description=f"Elite target share: {share:.1f}%",
                    details=f"{player.name} commands {share:.1f}% of team targets (last "
                            f"{USAGE_LOOKBACK_WEEKS} weeks). Weekly breakdown: {_weekly(targets)}. "
                            "This usage provides a high floor.",
                ))
            elif share <= TARGET_SHARE_THRESHOLDS.weak:
                signals.append(self.signal(
                    player, week, SignalType.USAGE_TARGET_SHARE, Impact.NEGATIVE,
                    magnitude=-2,
                    confidence=75,
                    short_description=f"Low target share: {share:.1f}%",
                    details=f"{player.name} has only {share:.1f}% of team targets. "
                            "Limited usage creates a low floor.",
                ))
            signals.extend(self._trend_signals(player, week, targets, 'Target share'))

        if position == 'RB' and carries is not None:
            share = carries.share
            if share >= CARRY_SHARE_THRESHOLDS.strong:
                signals.append(self.signal(
                    player, week, SignalType.USAGE_CARRY_SHARE, Impact.POSITIVE,
                    magnitude=4 if share >= CARRY_SHARE_THRESHOLDS.elite else 2,
                    confidence=85,
                    short_description=f"Workhorse: {share:.1f}% carry share",
                    details=f"{player.name} handles {share:.1f}% of team carries. "
                            f"Weekly: {_weekly(carries)}. Bellcow usage provides a volume floor.",
                ))
            elif share <= CARRY_SHARE_THRESHOLDS.weak:
                signals.append(self.signal(
                    player, week, SignalType.USAGE_CARRY_SHARE, Impact.NEGATIVE,
                    magnitude=-2,
                    confidence=75,
                    short_description=f"Committee back: {share:.1f}% carry share",
                    details=f"{player.name} has only {share:.1f}% of team carries. "
                            "Committee limits ceiling.",
                ))
            signals.extend(self._trend_signals(player, week, carries, 'Carry share'))

        if not signals:
            if position == 'RB' and carries is not None:
                summary = f"Usage stable ({carries.share:.1f}% carry share)"
            elif targets is not None:
                summary = f"Usage stable ({targets.share:.1f}% target share)"
            else:
                summary = "Usage stable"
        else:
            positives = [s for s in signals if s.impact == Impact.POSITIVE]
            negatives = [s for s in signals if s.impact == Impact.NEGATIVE]
            if len(positives) > len(negatives):
                summary = positives[0].short_description
            elif len(negatives) > len(positives):
                summary = negatives[0].short_description
            else:
                summary = "Mixed usage signals"

        return self.result(
            signals,
            summary,
            target_share=targets.share if targets else None,
            target_share_trend=targets.trend if targets else None,
            carry_share=carries.share if carries else None,
            carry_share_trend=carries.trend if carries else None,
        )

    def _trend_signals(self, player: Player, week: int, usage: UsageShare, label: str):
        if usage.trend == 'up':
            yield self.signal(
                player, week, SignalType.USAGE_TREND, Impact.POSITIVE,
                magnitude=2,
                confidence=70,
                short_description=f"{label} trending UP ({usage.share:.1f}%)",
                details=f"{player.name}'s {label.lower()} is increasing. "
                        f"Weekly: {_weekly(usage, ' -> ')}. Buy signal.",
            )
        elif usage.trend == 'down':
            yield self.signal(
                player, week, SignalType.USAGE_TREND, Impact.NEGATIVE,
                magnitude=-2,
                confidence=70,
                short_description=f"{label} trending DOWN ({usage.share:.1f}%)",
                details=f"{player.name}'s {label.lower()} is decreasing. "
                        f"Weekly: {_weekly(usage, ' -> ')}. Proceed with caution.",
            )
