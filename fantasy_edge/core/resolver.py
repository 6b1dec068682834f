"""
Game Context Resolver

Turns a player identity (name or Sleeper id) and an optional week into
the player plus their team's game that week. Every detector receives the
resulting GameContext, so resolution must succeed before any detector
runs.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from fantasy_edge.config import settings
from fantasy_edge.data.players import PlayerDirectory
from fantasy_edge.data.schedule import ScheduleService
from fantasy_edge.exceptions import NoScheduledGame, NoTeamAssigned, PlayerNotFound
from fantasy_edge.schemas import GameContext, Player

logger = logging.getLogger(__name__)


class GameContextResolver:
    """Resolves (identity, week) into (player, week, GameContext)."""

    def __init__(self, directory: PlayerDirectory, schedule: ScheduleService):
        self.directory = directory
        self.schedule = schedule

    def resolve(self, identity: str, week: Optional[int] = None) -> Tuple[Player, int, GameContext]:
        """
        Resolve a player's game context.

        Args:
            identity: Player name or id
            week: Schedule week (defaults to the schedule's current week)

        Returns:
            Tuple of (player, week, context)

        Raises:
            PlayerNotFound: Identity matches no known player
            NoTeamAssigned: Player is not on an NFL roster
            NoScheduledGame: Team is on bye in the target week
            ValueError: Week outside the regular season
        """
        player = self.directory.resolve(identity)
        if player is None:
            raise PlayerNotFound(identity)

        if not player.team:
            raise NoTeamAssigned(player.name)

        if week is None:
            week = self.schedule.get_current_week()
        else:
            week = settings.validate_week(week)

        entry = self.schedule.get_game(player.team, week)
        if entry is None:
            raise NoScheduledGame(player.team, week)

        kickoff = entry.kickoff_time
        if kickoff is None:
            logger.warning(f"No kickoff time for {player.team} week {week}, using current time")
            kickoff = datetime.now(timezone.utc)

        context = GameContext(
            team=player.team,
            opponent=entry.opponent,
            is_home=entry.is_home,
            kickoff_time=kickoff,
        )
        logger.debug(
            f"Resolved {player.name} ({player.team} {player.position.value}) week {week}: "
            f"{'vs' if context.is_home else '@'} {context.opponent}"
        )
        return player, week, context
