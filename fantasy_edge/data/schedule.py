"""
Schedule Service

Builds per-week team schedules from the ESPN scoreboard. Both teams of every
game get an entry, so a team missing from the map is on bye.

Usage:
    schedule = ScheduleService()
    week = schedule.get_current_week()
    entry = schedule.get_schedule(week).get("KC")
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Tuple

from configs.edge_config import BYE_REST_DAYS, STANDARD_REST_DAYS
from fantasy_edge.cache import TTLCache
from fantasy_edge.config import settings
from fantasy_edge.data.espn import EspnClient

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class ScheduleEntry:
    """One team's game in a week, seen from that team's side."""
    opponent: str
    is_home: bool
    kickoff_time: Optional[datetime]
    venue: str = ""
    is_international: bool = False


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days between two kickoffs, rounded up."""
    return math.ceil(abs((later - earlier).total_seconds()) / SECONDS_PER_DAY)


class ScheduleService:
    """Weekly schedule lookups backed by ESPN."""

    def __init__(
        self,
        espn: Optional[EspnClient] = None,
        season: Optional[int] = None,
        cache: Optional[TTLCache] = None,
    ):
        self.espn = espn or EspnClient()
        self.season = season or settings.SEASON
        self.cache = cache or TTLCache(settings.SCHEDULE_CACHE_TTL)

    def get_current_week(self) -> int:
        """
        Current regular season week.

        settings.CURRENT_WEEK wins when set; otherwise ESPN's live scoreboard
        week, clamped to the regular season.
        """
        if settings.CURRENT_WEEK:
            return settings.validate_week(settings.CURRENT_WEEK)
        _, week = self.espn.get_current_week()
        return max(1, min(week, settings.REGULAR_SEASON_WEEKS))

    def get_schedule(self, week: int) -> Dict[str, ScheduleEntry]:
        """Map of team -> ScheduleEntry for a week. Teams on bye are absent."""
        cached = self.cache.get(week)
        if cached is not None:
            return cached

        schedule: Dict[str, ScheduleEntry] = {}
        for game in self.espn.get_week_games(self.season, week):
            international = (game.get('country') or 'USA') not in ('USA', 'United States')
            home, away = game['home_team'], game['away_team']
            schedule[home] = ScheduleEntry(
                opponent=away,
                is_home=True,
                kickoff_time=game.get('kickoff'),
                venue=game.get('venue', ''),
                is_international=international,
            )
            schedule[away] = ScheduleEntry(
                opponent=home,
                is_home=False,
                kickoff_time=game.get('kickoff'),
                venue=game.get('venue', ''),
                is_international=international,
            )

        logger.info(f"Loaded week {week} schedule: {len(schedule) // 2} games")
        self.cache.set(week, schedule)
        return schedule

    def get_game(self, team: str, week: int) -> Optional[ScheduleEntry]:
        return self.get_schedule(week).get(team)

    def get_previous_game(self, team: str, week: int) -> Optional[Tuple[int, ScheduleEntry]]:
        """
        Walk back from the week before `week` to the team's last game.

        Returns:
            (week, ScheduleEntry) or None in week 1 / when nothing is found
        """
        for previous in range(week - 1, 0, -1):
            entry = self.get_game(team, previous)
            if entry is not None:
                return previous, entry
        return None

    def get_rest_days(self, team: str, week: int, kickoff: datetime) -> int:
        """
        Days of rest before this week's kickoff, capped at two weeks.

        Teams with no earlier game (week 1) get the standard seven days.
        """
        previous = self.get_previous_game(team, week)
        if previous is None or previous[1].kickoff_time is None:
            return STANDARD_REST_DAYS
        return min(BYE_REST_DAYS, days_between(previous[1].kickoff_time, kickoff))
