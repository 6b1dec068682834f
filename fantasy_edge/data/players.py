"""
Player Resolution Service

Maps a free-form identity (Sleeper id or player name) to a Player.

Matching order:
1. Exact Sleeper id
2. Normalized exact name (handles Jr., III, apostrophes)
3. Case-insensitive substring of the normalized name

Within a tier, rostered active players win over free agents.
"""

import logging
from typing import Callable, Dict, List, Optional

from fantasy_edge.data.sleeper import SleeperClient, normalize_name
from fantasy_edge.schemas import Player

logger = logging.getLogger(__name__)


class PlayerDirectory:
    """Lookup service over a player source."""

    def __init__(self, source: Optional[Callable[[], Dict[str, Player]]] = None):
        """
        Args:
            source: Callable returning players keyed by id. Defaults to
                SleeperClient().get_players.
        """
        self._source = source or SleeperClient().get_players

    @classmethod
    def from_players(cls, players: List[Player]) -> 'PlayerDirectory':
        """Build a directory over a fixed list (used by tests and offline runs)."""
        by_id = {p.id: p for p in players}
        return cls(source=lambda: by_id)

    def resolve(self, name_or_id: str) -> Optional[Player]:
        """
        Resolve a player identity.

        Returns:
            Player if found, None otherwise
        """
        if not name_or_id:
            return None
        players = self._source()

        identity = str(name_or_id).strip()
        if identity in players:
            return players[identity]

        target = normalize_name(identity)
        if not target:
            return None

        exact = [p for p in players.values() if normalize_name(p.name) == target]
        if exact:
            return self._best(exact)

        partial = [p for p in players.values() if target in normalize_name(p.name)]
        if partial:
            logger.debug(f"Partial name match for '{identity}': {len(partial)} candidates")
            return self._best(partial)

        return None

    @staticmethod
    def _best(candidates: List[Player]) -> Player:
        """Prefer rostered, then active players; otherwise the first match."""
        rostered = [c for c in candidates if c.team]
        if rostered:
            candidates = rostered
        active = [c for c in candidates if c.status == 'Active']
        if active:
            return active[0]
        return candidates[0]
