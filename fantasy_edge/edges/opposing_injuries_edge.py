"""
Opposing Defense Injuries Edge

Missing defenders open up specific matchups:
- CB out: WRs feast
- LB out: TEs and RBs find room
- EDGE/DE out: QB gets more time
- DT/NT out: running lanes open up
"""

import logging
from typing import Dict, List

from configs.edge_config import (
    DEFENDER_BOOST_CAP,
    DEFENDER_BOOSTS,
    DEFENDER_KEY_BOOST,
    DEFENDER_MIN_STATUS_WEIGHT,
    DEFENDER_STATUS_WEIGHTS,
    SLEEPER_STATUS_MAP,
)
from fantasy_edge.data.sleeper import SleeperClient
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_to

logger = logging.getLogger(__name__)

OFFENSIVE_POSITIONS = ('QB', 'RB', 'WR', 'TE')


class OpposingInjuriesDetector(BaseDetector):
    """Injured starters on the opponent's defense (Sleeper)."""

    category = "opposing_injuries"
    label = "Opp D Injuries"
    source = "sleeper_injuries"

    def __init__(self, sleeper: SleeperClient):
        self.sleeper = sleeper

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        opponent = context.opponent

        injuries = []
        for inj in self.sleeper.get_defensive_injuries(opponent):
            status = SLEEPER_STATUS_MAP.get(inj['injury_status'], inj['injury_status'])
            if DEFENDER_STATUS_WEIGHTS.get(status, 0) >= DEFENDER_MIN_STATUS_WEIGHT:
                injuries.append({'name': inj['name'], 'position': inj['position'].upper(), 'status': status})

        if not injuries:
            return self.empty(f"No significant {opponent} D injuries", key_missing=[])

        boosts: Dict[str, float] = {pos: 0.0 for pos in OFFENSIVE_POSITIONS}
        key_missing: List[str] = []

        for injury in injuries:
            boost = DEFENDER_BOOSTS.get(injury['position'])
            if boost is None:
                continue
            weight = DEFENDER_STATUS_WEIGHTS[injury['status']]
            for pos in OFFENSIVE_POSITIONS:
                boosts[pos] += boost.for_position(pos) * weight

            label = f"{injury['name']} ({injury['position']})"
            if boost.max_boost >= DEFENDER_KEY_BOOST:
                if injury['status'] in ('Out', 'IR', 'Doubtful'):
                    key_missing.append(label)
                elif injury['status'] == 'Questionable':
                    key_missing.append(f"{label} GTD")

        boosts = {pos: min(DEFENDER_BOOST_CAP, round_to(value, 1)) for pos, value in boosts.items()}
        position = player.position.value
        relevant = boosts.get(position, 0.0)

        signals = []
        has_key_injuries = len(key_missing) >= 2 or (len(key_missing) >= 1 and relevant >= 1.5)
        if relevant >= 1.0 and has_key_injuries:
            significant = relevant >= 2.0 and len(key_missing) >= 2
            missing = ", ".join(key_missing)
            by_position = ", ".join(f"{pos}: +{boosts[pos]:.1f}" for pos in OFFENSIVE_POSITIONS)
            signals.append(self.signal(
                player, week, SignalType.MATCHUP_DEF_INJURY, Impact.POSITIVE,
                magnitude=round_to(relevant, 1),
                confidence=75 if significant else 60,
                short_description=(f"KEY D INJURIES: {opponent} missing {missing}" if significant
                                   else f"{opponent} D depleted: {missing}"),
                details=f"{opponent} defense has key players missing: {missing}. "
                        f"Boost by position - {by_position}. "
                        f"This creates a favorable matchup for {position}s.",
            ))

        if key_missing:
            gtd = sum(1 for p in key_missing if p.endswith('GTD'))
            out = len(key_missing) - gtd
            parts = []
            if out:
                parts.append(f"{out} out")
            if gtd:
                parts.append(f"{gtd} GTD")
            summary = f"{opponent} missing {len(key_missing)} defenders ({', '.join(parts)})"
        else:
            summary = f"No significant {opponent} D injuries"

        return self.result(signals, summary, key_missing=key_missing, position_boost=relevant)
