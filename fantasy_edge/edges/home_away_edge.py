"""
Home/Away Split Edge

Some players are dramatically better at home (crowd, routine, surface).
Compares this season's PPR points per game at home vs on the road and
flags splits of 20% or more.
"""

import logging

from configs.edge_config import HOME_AWAY_RULE, split_confidence, split_magnitude
from fantasy_edge.data.nflverse import NflverseClient
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


class HomeAwayDetector(BaseDetector):
    category = "home_away"
    label = "Home/Away"
    source = "home-away-splits (nflverse)"

    def __init__(self, nflverse: NflverseClient):
        self.nflverse = nflverse

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        splits = self.nflverse.get_home_away_splits(player.name)
        if splits is None:
            return self.empty("No split data available", split_pct=0.0)

        is_home = context.is_home
        abs_diff = abs(splits.split_pct)
        if abs_diff < HOME_AWAY_RULE.min_pct:
            return self.empty("No significant home/away split", split_pct=splits.split_pct)

        current = splits.home_ppg if is_home else splits.away_ppg
        other = splits.away_ppg if is_home else splits.home_ppg
        favorable = current > other
        location = 'home' if is_home else 'away'
        pct = round_half_up(abs_diff)

        if favorable:
            short = f"+{pct}% {location} boost ({current:.1f} vs {other:.1f} PPG)"
        else:
            short = f"-{pct}% {location} decline ({current:.1f} vs {other:.1f} PPG)"

        signal = self.signal(
            player, week, SignalType.HOME_AWAY_SPLIT,
            Impact.POSITIVE if favorable else Impact.NEGATIVE,
            magnitude=split_magnitude(HOME_AWAY_RULE, abs_diff, favorable),
            confidence=split_confidence(HOME_AWAY_RULE, splits.home_games + splits.away_games),
            short_description=short,
            details=f"{player.name} averages {splits.home_ppg:.1f} PPG at home ({splits.home_games} games) "
                    f"vs {splits.away_ppg:.1f} PPG on the road ({splits.away_games} games). "
                    f"Playing {location} this week {'favors' if favorable else 'hurts'} their projection.",
        )

        summary = f"{'Home' if is_home else 'Road'} {'boost' if favorable else 'fade'}: {pct}% split"
        return self.result([signal], summary, split_pct=splits.split_pct)
