"""
Division Rivalry Edge

Division games are historically 3-4 points closer than the spread
suggests. The signal is informational (neutral impact): it widens the
range of outcomes rather than moving the projection.
"""

import logging

from fantasy_edge.constants import is_division_game, is_intense_rivalry
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType

logger = logging.getLogger(__name__)


class DivisionRivalryDetector(BaseDetector):
    category = "division_rivalry"
    label = "Division"
    source = "division-rivalry"

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        team, opponent = context.team, context.opponent

        if not is_division_game(team, opponent):
            return self.empty("Non-division game", is_division_game=False, is_intense_rivalry=False)

        rivalry = is_intense_rivalry(team, opponent)
        signal = self.signal(
            player, week, SignalType.DIVISION_RIVALRY, Impact.NEUTRAL,
            magnitude=1 if rivalry else 0,
            confidence=60 if rivalry else 50,
            short_description=(f"Intense rivalry: {team} vs {opponent}" if rivalry
                               else f"Division game: {team} vs {opponent}"),
            details="Division games are historically 3-4 points closer than the spread suggests. "
                    + ("This is an intense rivalry with extra motivation on both sides. " if rivalry else "")
                    + "Expect a less predictable game script; both ceiling and floor games are possible.",
        )
        summary = (f"Rivalry game vs {opponent} - high variance" if rivalry
                   else f"Division game vs {opponent}")
        return self.result([signal], summary, is_division_game=True, is_intense_rivalry=rivalry)
