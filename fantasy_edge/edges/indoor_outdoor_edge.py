"""
Indoor/Outdoor Split Edge

Players who feast in domes or wilt outdoors. Whether this week's game is
indoors comes from the home stadium; the split is this season's PPR
points per game under a roof vs outdoors.
"""

import logging

from configs.edge_config import INDOOR_OUTDOOR_RULE, split_confidence, split_magnitude
from fantasy_edge.constants import is_indoor_venue
from fantasy_edge.data.nflverse import NflverseClient
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


class IndoorOutdoorDetector(BaseDetector):
    category = "indoor_outdoor"
    label = "Venue"
    source = "indoor-outdoor-splits"

    def __init__(self, nflverse: NflverseClient):
        self.nflverse = nflverse

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        is_indoor = is_indoor_venue(context.home_team)
        venue = 'Dome' if is_indoor else 'Outdoor'

        splits = self.nflverse.get_indoor_outdoor_splits(player.name)
        base = (splits.indoor_ppg + splits.outdoor_ppg) / 2 if splits else 0.0
        if splits is None or base <= 0:
            return self.empty(f"{venue} game - no split data", is_indoor=is_indoor, split_pct=0.0)

        current = splits.indoor_ppg if is_indoor else splits.outdoor_ppg
        other = splits.outdoor_ppg if is_indoor else splits.indoor_ppg
        diff = (current - other) / base * 100
        abs_diff = abs(diff)
        if abs_diff < INDOOR_OUTDOOR_RULE.min_pct:
            return self.empty(f"{venue} game - neutral split", is_indoor=is_indoor, split_pct=diff)

        favorable = current > other
        setting = 'Indoor' if is_indoor else 'Outdoor'
        signal = self.signal(
            player, week, SignalType.INDOOR_OUTDOOR_SPLIT,
            Impact.POSITIVE if favorable else Impact.NEGATIVE,
            magnitude=split_magnitude(INDOOR_OUTDOOR_RULE, abs_diff, favorable),
            confidence=split_confidence(INDOOR_OUTDOOR_RULE, splits.indoor_games + splits.outdoor_games),
            short_description=f"{setting} {'boost' if favorable else 'fade'}: {current:.1f} vs {other:.1f} PPG",
            details=f"{player.name} averages {splits.indoor_ppg:.1f} PPG in domes vs "
                    f"{splits.outdoor_ppg:.1f} PPG outdoors. "
                    + ("Dome games typically see higher passing volume." if is_indoor
                       else "Weather elements can impact passing games."),
        )

        sign = '+' if diff > 0 else '-'
        summary = f"{venue} {'boost' if favorable else 'fade'}: {sign}{round_half_up(abs_diff)}%"
        return self.result([signal], summary, is_indoor=is_indoor, split_pct=diff)
