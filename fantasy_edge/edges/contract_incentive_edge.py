"""
Contract Incentives Edge

Players chasing contract bonuses in Weeks 17-18 tend to see force-fed
volume: teams scheme to help them hit the number. Incentives come from
configs/contract_incentives.yaml.
"""

import logging

from configs.edge_config import INCENTIVE_MIN_WEEK, INCENTIVE_NEAR_THRESHOLD_PCT
from fantasy_edge.data.reference import find_contract_incentives
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def format_bonus(amount: float) -> str:
    """$1.0M style for seven figures, $625K below."""
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f}M"
    return f"${round_half_up(amount / 1000)}K"


class ContractIncentiveDetector(BaseDetector):
    category = "contract_incentive"
    label = "Contract"
    source = "contract-incentives"

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        if week < INCENTIVE_MIN_WEEK:
            return self.empty("Contract incentives most relevant Weeks 17-18", has_incentive=False)

        contract = find_contract_incentives(player.id, player.name)
        if contract is None or not contract.incentives:
            return self.empty("No verified contract incentives", has_incentive=False)

        achievable = sorted(
            (inc for inc in contract.incentives if inc.achievable),
            key=lambda inc: inc.bonus,
            reverse=True,
        )
        if not achievable:
            return self.empty("Incentives likely out of reach", has_incentive=False)

        primary = achievable[0]
        magnitude = min(4, round_half_up(primary.bonus / 1_000_000 * 2))
        if primary.threshold and primary.needed / primary.threshold <= INCENTIVE_NEAR_THRESHOLD_PCT:
            magnitude += 1
        magnitude = min(5, magnitude)

        if primary.needed <= 10:
            confidence = 85
        elif primary.needed <= 50:
            confidence = 75
        else:
            confidence = 70

        bonus = format_bonus(primary.bonus)
        details = (
            f"{player.name} has a {bonus} bonus for reaching {primary.threshold:g} {primary.type}. "
            f"Currently at {primary.current:g}, needs {primary.needed:g} more. "
            "Teams actively help players hit incentives - expect elevated usage."
        )
        if len(achievable) > 1:
            secondary = achievable[1]
            details += f" Also chasing {format_bonus(secondary.bonus)} for {secondary.type}."

        signal = self.signal(
            player, week, SignalType.USAGE_TARGET_SHARE, Impact.POSITIVE,
            magnitude=magnitude,
            confidence=confidence,
            short_description=f"INCENTIVE: {bonus} for {primary.needed:g} more {primary.type}",
            details=details,
        )
        return self.result(
            [signal],
            f"{bonus}: needs {primary.needed:g} {primary.type}",
            has_incentive=True,
        )
