"""
Rest Advantage Edge

Compares days of rest for both teams, measured from each team's previous
kickoff (capped at two weeks after a bye). Teams with a rest edge of
3+ days have historically won ~54% of games.
"""

import logging

from configs.edge_config import REST_EDGE_MIN_DIFF
from fantasy_edge.data.schedule import ScheduleService
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType

logger = logging.getLogger(__name__)

MAX_REST_MAGNITUDE = 3


class RestAdvantageDetector(BaseDetector):
    category = "rest_advantage"
    label = "Rest"
    source = "rest-advantage"

    def __init__(self, schedule: ScheduleService):
        self.schedule = schedule

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        team, opponent = context.team, context.opponent
        team_rest = self.schedule.get_rest_days(team, week, context.kickoff_time)
        opp_rest = self.schedule.get_rest_days(opponent, week, context.kickoff_time)
        diff = team_rest - opp_rest
        flags = dict(rest_days=team_rest, opponent_rest_days=opp_rest, has_advantage=diff > 0)

        if abs(diff) < REST_EDGE_MIN_DIFF:
            return self.empty("Equal rest", **flags)

        advantage = diff > 0
        size = min(MAX_REST_MAGNITUDE, abs(diff) / 3)
        signal = self.signal(
            player, week, SignalType.REST_ADVANTAGE,
            Impact.POSITIVE if advantage else Impact.NEGATIVE,
            magnitude=size if advantage else -size,
            confidence=65,
            short_description=(f"Rest edge: {team_rest} days vs opponent's {opp_rest}" if advantage
                               else f"Rest disadvantage: {team_rest} days vs opponent's {opp_rest}"),
            details=(f"{team} has {diff} extra days of rest compared to {opponent}. "
                     "Fresher legs and more time to game plan." if advantage
                     else f"{team} has {abs(diff)} fewer days of rest compared to {opponent}. "
                          "Short rest hits older players hardest."),
        )
        summary = (f"Rest edge: +{diff} days vs {opponent}" if advantage
                   else f"Short rest: {diff} days vs {opponent}")
        return self.result([signal], summary, **flags)
