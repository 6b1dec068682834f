"""
Travel/Rest Edge

Situational disadvantages from the schedule:
- Timezone travel (East to West is harder than West to East)
- Short weeks (Thursday after Sunday)
- London/international games
- Denver altitude for visiting teams
- First game back from a bye (informational)
"""

import logging
from datetime import datetime

from configs.edge_config import HIGH_ALTITUDE_FT, SHORT_WEEK_DAYS
from fantasy_edge.constants import STADIUMS, timezone_shift, to_eastern
from fantasy_edge.data.schedule import ScheduleService, days_between
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType

logger = logging.getLogger(__name__)

THURSDAY = 3


def is_thursday(kickoff: datetime) -> bool:
    """Kickoff falls on a Thursday, US Eastern."""
    return to_eastern(kickoff).weekday() == THURSDAY


class TravelDetector(BaseDetector):
    """Travel distance, rest and venue effects on the player's team."""

    category = "travel"
    label = "Travel/Rest"
    source = "schedule_analysis"

    def __init__(self, schedule: ScheduleService):
        self.schedule = schedule

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        team, opponent = context.team, context.opponent
        signals = []

        entry = self.schedule.get_game(team, week)
        is_international = bool(entry and entry.is_international)

        # 1. Timezone travel (away games only)
        if not context.is_home and not is_international:
            shift = timezone_shift(team, opponent)
            if shift <= -2:
                signals.append(self.signal(
                    player, week, SignalType.TRAVEL_TIMEZONE, Impact.NEGATIVE,
                    magnitude=-4 if shift <= -3 else -2,
                    confidence=75,
                    short_description=f"East-to-West travel: {abs(shift)} timezone shift",
                    details=f"{team} traveling to {opponent}'s stadium. Body clocks are "
                            f"{abs(shift)} hours ahead, affecting afternoon games especially.",
                ))

        # 2. Short week / after bye
        previous = self.schedule.get_previous_game(team, week)
        after_bye = previous is not None and previous[0] < week - 1
        if previous is not None and previous[1].kickoff_time is not None:
            rest = days_between(previous[1].kickoff_time, context.kickoff_time)
            if rest <= SHORT_WEEK_DAYS:
                thursday = is_thursday(context.kickoff_time)
                signals.append(self.signal(
                    player, week, SignalType.TRAVEL_SHORT_WEEK, Impact.NEGATIVE,
                    magnitude=-5 if thursday else -3,
                    confidence=80,
                    short_description=f"Short week: {rest} days rest",
                    details=f"Only {rest} days since last game. "
                            + ("Thursday Night Football after Sunday = minimal recovery. " if thursday else "")
                            + "Injury risk elevated, game planning reduced.",
                ))

        # 3. International game
        if is_international:
            signals.append(self.signal(
                player, week, SignalType.TRAVEL_LONDON, Impact.NEGATIVE,
                magnitude=-3,
                confidence=70,
                short_description="International game: London",
                details="International games require a 5+ hour timezone adjustment. "
                        "Jet lag persists even for teams that arrive early.",
            ))

        # 4. Altitude (visiting teams)
        home_stadium = STADIUMS.get(opponent)
        if not context.is_home and home_stadium and home_stadium.elevation >= HIGH_ALTITUDE_FT:
            signals.append(self.signal(
                player, week, SignalType.TRAVEL_ALTITUDE, Impact.NEGATIVE,
                magnitude=-3,
                confidence=75,
                short_description="Altitude: Playing at Mile High (5,280 ft)",
                details="Elevation affects oxygen availability. Visiting teams show "
                        "reduced stamina late in games.",
                source="stadium_data",
            ))

        # 5. First game back from bye
        if after_bye:
            signals.append(self.signal(
                player, week, SignalType.TRAVEL_SHORT_WEEK, Impact.NEUTRAL,
                magnitude=0,
                confidence=60,
                short_description="First game after bye week",
                details="Extra rest and prep time. Historically mixed results; "
                        "injured players may return and change projected usage.",
            ))

        negatives = [s for s in signals if s.impact == Impact.NEGATIVE]
        if not negatives:
            summary = "No significant travel/rest concerns"
        else:
            concerns = ", ".join(
                s.type.value.replace('travel_', '').replace('_', ' ', 1) for s in negatives
            )
            total = sum(abs(s.magnitude) for s in negatives)
            summary = f"Situational concerns: {concerns} (combined impact: -{total:g})"

        return self.result(signals, summary)
