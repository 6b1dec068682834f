"""Shared helpers: rounding and team name normalization."""

from .rounding import round_half_up, round_to
from .team_names import NFL_TEAMS, normalize_team_name

__all__ = [
    'round_half_up',
    'round_to',
    'NFL_TEAMS',
    'normalize_team_name',
]
