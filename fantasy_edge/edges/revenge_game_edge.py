"""
Revenge Game Edge

Players facing a former team, especially after a bitter exit, have
historically posted a 12-15% scoring bump. Narratives come from
configs/revenge_games.yaml; the game is live when this week's opponent is
the player's former team.
"""

import logging

from fantasy_edge.data.reference import find_by_name, load_revenge_games
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType

logger = logging.getLogger(__name__)

MAX_REVENGE_MAGNITUDE = 4


class RevengeGameDetector(BaseDetector):
    category = "revenge_game"
    label = "Revenge"
    source = "revenge-games"

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        revenge = find_by_name(load_revenge_games(), player.name)
        if revenge is None:
            return self.empty("No revenge game narrative", is_revenge_game=False)

        if context.opponent != revenge.former_team:
            return self.empty(
                f"Revenge game vs {revenge.former_team} (not this week)",
                is_revenge_game=False,
            )

        magnitude = 2
        confidence = 70
        if revenge.bitter_exit:
            magnitude += 1
            confidence += 5
        if revenge.years_with_current == 1:
            magnitude += 1
            confidence += 5
        magnitude = min(MAX_REVENGE_MAGNITUDE, magnitude)

        signal = self.signal(
            player, week, SignalType.MATCHUP_DEFENSE, Impact.POSITIVE,
            magnitude=magnitude,
            confidence=confidence,
            short_description=f"REVENGE GAME vs {revenge.former_team}",
            details=f"{player.name} faces former team {revenge.former_team}. "
                    f"Left via {revenge.circumstances.replace('_', ' ')} "
                    f"{revenge.years_with_current} year(s) ago. "
                    + ("Departure was acrimonious - extra motivation. " if revenge.bitter_exit else "")
                    + "Revenge games historically produce 12-15% fantasy scoring bumps.",
        )
        summary = f"REVENGE GAME vs {revenge.former_team}" + (" (bitter)" if revenge.bitter_exit else "")
        return self.result([signal], summary, is_revenge_game=True)
