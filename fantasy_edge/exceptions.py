"""Exception hierarchy for the fantasy edge engine."""

from typing import Optional


class EdgeError(Exception):
    """Base class for all fantasy edge errors."""
    pass


class ResolutionError(EdgeError):
    """Raised when a player's game context cannot be resolved.

    Resolution errors are fatal to a single analysis request and are
    surfaced directly to the caller without retry.
    """
    pass


class PlayerNotFound(ResolutionError):
    """Raised when an identity does not match any known player."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"Player not found: {identity}")


class NoTeamAssigned(ResolutionError):
    """Raised when the resolved player is not on an NFL roster."""

    def __init__(self, player_name: str):
        self.player_name = player_name
        super().__init__(f"Player {player_name} has no team")


class NoScheduledGame(ResolutionError):
    """Raised when the player's team does not play in the target week (bye)."""

    def __init__(self, team: str, week: int):
        self.team = team
        self.week = week
        super().__init__(f"No game found for {team} in week {week}")


class ProviderError(EdgeError):
    """Raised when an upstream data provider is unreachable or returns garbage."""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider}: {message}")
