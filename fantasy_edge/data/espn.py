"""
ESPN API Client

ESPN's public site and core APIs are undocumented and unauthenticated. They
supply the current week, the weekly scoreboard (schedule, kickoff, venue)
and team injury reports.

Injury reports are returned as lists of $ref links; each injury and each
athlete must be followed with its own request, so team reports are capped
at 20 entries and cached for 15 minutes.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import requests

from fantasy_edge.cache import TTLCache
from fantasy_edge.config import settings
from fantasy_edge.constants import OL_POSITIONS
from fantasy_edge.data.http import get_json
from fantasy_edge.exceptions import ProviderError
from fantasy_edge.utils.team_names import normalize_team_name

logger = logging.getLogger(__name__)

ESPN_TEAM_IDS: Dict[str, str] = {
    'ARI': '22', 'ATL': '1', 'BAL': '33', 'BUF': '2',
    'CAR': '29', 'CHI': '3', 'CIN': '4', 'CLE': '5',
    'DAL': '6', 'DEN': '7', 'DET': '8', 'GB': '9',
    'HOU': '34', 'IND': '11', 'JAX': '30', 'KC': '12',
    'LAC': '24', 'LAR': '14', 'LV': '13', 'MIA': '15',
    'MIN': '16', 'NE': '17', 'NO': '18', 'NYG': '19',
    'NYJ': '20', 'PHI': '21', 'PIT': '23', 'SEA': '26',
    'SF': '25', 'TB': '27', 'TEN': '10', 'WAS': '28',
}

INJURY_STATUS_MAP: Dict[str, str] = {
    'Out': 'Out',
    'Doubtful': 'Doubtful',
    'Questionable': 'Questionable',
    'Probable': 'Probable',
    'Injured Reserve': 'IR',
    'IR': 'IR',
    'Day-To-Day': 'Questionable',
    'Active': 'Probable',
}

MAX_INJURY_ITEMS = 20
REGULAR_SEASON_TYPE = 2


def normalize_injury_status(status: Optional[str]) -> str:
    """Map an ESPN status onto Out/Doubtful/Questionable/Probable/IR."""
    return INJURY_STATUS_MAP.get(status or '', 'Questionable')


def parse_kickoff(value: Optional[str]) -> Optional[datetime]:
    """Parse an ESPN ISO timestamp ("2025-09-07T17:00Z")."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        logger.warning(f"Unparseable ESPN kickoff time: {value}")
        return None


class EspnClient:
    """ESPN scoreboard and injury lookups with per-instance caches."""

    def __init__(
        self,
        schedule_cache: Optional[TTLCache] = None,
        injury_cache: Optional[TTLCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self.schedule_cache = schedule_cache or TTLCache(settings.SCHEDULE_CACHE_TTL)
        self.injury_cache = injury_cache or TTLCache(settings.INJURY_CACHE_TTL)
        self.session = session

    def _fetch(self, url: str, cache: TTLCache, params: Optional[Dict[str, Any]] = None) -> Any:
        key = (url, tuple(sorted((params or {}).items())))
        cached = cache.get(key)
        if cached is not None:
            logger.debug(f"ESPN cache hit: {url}")
            return cached
        logger.info(f"Fetching {url} from ESPN")
        data = get_json("espn", url, params=params, session=self.session)
        cache.set(key, data)
        return data

    # =========================================================================
    # SCHEDULE
    # =========================================================================

    def get_current_week(self) -> Tuple[int, int]:
        """
        Current season and week from the live scoreboard.

        Returns:
            (season, week)

        Raises:
            ProviderError: If the scoreboard is missing week/season
        """
        data = self._fetch(f"{settings.ESPN_SITE_API}/scoreboard", self.schedule_cache)
        try:
            return int(data['season']['year']), int(data['week']['number'])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError("espn", f"Scoreboard missing season/week: {e}") from e

    def get_week_games(self, season: int, week: int) -> List[Dict[str, Any]]:
        """
        Games for a regular season week.

        Returns:
            List of {home_team, away_team, kickoff, venue, country}
        """
        data = self._fetch(
            f"{settings.ESPN_SITE_API}/scoreboard",
            self.schedule_cache,
            params={'week': week, 'seasontype': REGULAR_SEASON_TYPE, 'dates': season},
        )

        games = []
        for event in data.get('events', []) or []:
            competitions = event.get('competitions') or []
            if not competitions:
                continue
            competition = competitions[0]

            home_team = away_team = ''
            for competitor in competition.get('competitors', []):
                abbr = normalize_team_name(competitor.get('team', {}).get('abbreviation', ''))
                if competitor.get('homeAway') == 'home':
                    home_team = abbr
                elif competitor.get('homeAway') == 'away':
                    away_team = abbr
            if not home_team or not away_team:
                continue

            venue = competition.get('venue') or {}
            address = venue.get('address') or {}
            games.append({
                'home_team': home_team,
                'away_team': away_team,
                'kickoff': parse_kickoff(event.get('date') or competition.get('date')),
                'venue': venue.get('fullName', ''),
                'country': address.get('country', 'USA'),
            })
        return games

    # =========================================================================
    # INJURIES
    # =========================================================================

    def get_team_injuries(self, team: str) -> List[Dict[str, str]]:
        """
        Injury report for a team.

        Returns:
            List of {name, position, status, injury}. Unknown teams return [].
        """
        team_id = ESPN_TEAM_IDS.get(team)
        if not team_id:
            logger.warning(f"Unknown team for ESPN injuries: {team}")
            return []

        listing = self._fetch(f"{settings.ESPN_CORE_API}/teams/{team_id}/injuries", self.injury_cache)
        items = (listing or {}).get('items') or []

        injuries = []
        for item in items[:MAX_INJURY_ITEMS]:
            ref = item.get('$ref')
            if not ref:
                continue
            try:
                detail = self._fetch(ref, self.injury_cache)
                athlete_ref = (detail.get('athlete') or {}).get('$ref')
                athlete = self._fetch(athlete_ref, self.injury_cache) if athlete_ref else {}
            except ProviderError as e:
                # One broken ref should not hide the rest of the report
                logger.warning(f"Skipping ESPN injury entry for {team}: {e}")
                continue

            injuries.append({
                'name': athlete.get('displayName') or athlete.get('fullName') or 'Unknown',
                'position': ((athlete.get('position') or {}).get('abbreviation') or 'Unknown').upper(),
                'status': normalize_injury_status(detail.get('status')),
                'injury': (detail.get('type') or {}).get('text') or 'Undisclosed',
            })
        return injuries

    def get_ol_injuries(self, team: str) -> List[Dict[str, str]]:
        """Injury report filtered to offensive linemen (exact position match)."""
        return [inj for inj in self.get_team_injuries(team) if inj['position'] in OL_POSITIONS]
