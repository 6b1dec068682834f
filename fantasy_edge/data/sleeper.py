"""
Sleeper Player Database Client

Sleeper publishes its full NFL player database as one JSON document keyed by
Sleeper player id. It is the source for player identity (name, position,
team) and for defender injury statuses.

The document is large (~5MB) and changes slowly, so it is cached for a day.

Usage:
    client = SleeperClient()
    players = client.get_players()
    injuries = client.get_defensive_injuries("KC")
"""

import logging
import re
from typing import Any, Dict, List, Optional

import requests

from fantasy_edge.cache import TTLCache
from fantasy_edge.config import settings
from fantasy_edge.constants import (
    DEFENSIVE_INJURY_STATUSES,
    DEFENSIVE_POSITIONS,
    FANTASY_POSITIONS,
)
from fantasy_edge.data.http import get_json
from fantasy_edge.schemas import Player, Position
from fantasy_edge.utils.team_names import normalize_team_name

logger = logging.getLogger(__name__)

_RAW_KEY = "raw"
_PLAYERS_KEY = "players"


def normalize_name(name: str) -> str:
    """
    Normalize a player name for matching.

    Handles:
    - Case insensitivity
    - Suffix removal (Jr., II, III, IV, Sr.)
    - Hyphens and apostrophes
    - Special characters
    """
    if not name:
        return ""

    name = name.lower().strip()

    suffixes = [' jr.', ' jr', ' sr.', ' sr', ' iii', ' ii', ' iv', ' v']
    for suffix in suffixes:
        if name.endswith(suffix):
            name = name[:-len(suffix)]

    name = re.sub(r"['-]", ' ', name)
    name = re.sub(r'[^\w\s]', '', name)
    name = re.sub(r'\s+', ' ', name).strip()

    return name


def _full_name(data: Dict[str, Any]) -> str:
    full = data.get('full_name')
    if full:
        return full
    return f"{data.get('first_name', '')} {data.get('last_name', '')}".strip()


class SleeperClient:
    """Cached access to the Sleeper NFL player database."""

    def __init__(self, cache: Optional[TTLCache] = None, session: Optional[requests.Session] = None):
        self.cache = cache or TTLCache(settings.PLAYER_CACHE_TTL)
        self.session = session

    def _raw_players(self) -> Dict[str, Dict[str, Any]]:
        cached = self.cache.get(_RAW_KEY)
        if cached is not None:
            logger.debug("Sleeper player database cache hit")
            return cached

        logger.info(f"Fetching player database from {settings.SLEEPER_PLAYERS_URL}")
        payload = get_json("sleeper", settings.SLEEPER_PLAYERS_URL, session=self.session)
        if not isinstance(payload, dict):
            payload = {}
        logger.info(f"Retrieved {len(payload):,} players from Sleeper")
        self.cache.set(_RAW_KEY, payload)
        return payload

    def get_players(self) -> Dict[str, Player]:
        """
        Fantasy-relevant players keyed by Sleeper id.

        Only QB/RB/WR/TE/K/DEF are kept. Players without a team are kept
        with team=None so that resolution can report NoTeamAssigned.
        """
        cached = self.cache.get(_PLAYERS_KEY)
        if cached is not None:
            return cached

        players: Dict[str, Player] = {}
        for player_id, data in self._raw_players().items():
            position = data.get('position')
            if position not in FANTASY_POSITIONS:
                continue
            name = _full_name(data)
            if not name:
                continue
            team = normalize_team_name(data.get('team') or '') or None
            players[str(player_id)] = Player(
                id=str(player_id),
                name=name,
                position=Position(position),
                team=team,
                status=data.get('status'),
                injury_status=data.get('injury_status'),
            )

        self.cache.set(_PLAYERS_KEY, players)
        return players

    def get_defensive_injuries(self, team: str) -> List[Dict[str, str]]:
        """
        Injured defenders on a team.

        Args:
            team: Team abbreviation

        Returns:
            List of {name, position, injury_status}
        """
        injuries = []
        for data in self._raw_players().values():
            if normalize_team_name(data.get('team') or '') != team:
                continue
            status = data.get('injury_status')
            if status not in DEFENSIVE_INJURY_STATUSES:
                continue
            position = data.get('position') or ''
            if position not in DEFENSIVE_POSITIONS:
                fantasy_positions = data.get('fantasy_positions') or []
                position = next((p for p in fantasy_positions if p in DEFENSIVE_POSITIONS), '')
            if not position:
                continue
            injuries.append({
                'name': _full_name(data),
                'position': position,
                'injury_status': status,
            })
        return injuries
