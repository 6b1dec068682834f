"""
NFL Reference Constants for Edge Detection

Stadiums, divisions and position groups live here so that every detector
reads venue and roster logic from one place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, FrozenSet, List

import pytz

US_EASTERN = pytz.timezone('US/Eastern')

# Positions the player resolution service keeps (fantasy-relevant only)
FANTASY_POSITIONS = ['QB', 'RB', 'WR', 'TE', 'K', 'DEF']

# Offensive line positions as reported by ESPN injury feeds.
# Exact match only - substring checks would catch DT, NT, DE.
OL_POSITIONS = frozenset(['OT', 'OG', 'C', 'T', 'G', 'LT', 'RT', 'LG', 'RG', 'OL'])

# Defensive positions as reported by Sleeper
DEFENSIVE_POSITIONS = frozenset([
    'CB', 'S', 'FS', 'SS', 'DB',
    'LB', 'MLB', 'ILB', 'OLB',
    'DE', 'DT', 'NT', 'DL', 'EDGE',
])

# Sleeper injury statuses worth reporting for defenders
DEFENSIVE_INJURY_STATUSES = frozenset(['Out', 'IR', 'Doubtful', 'Questionable', 'PUP', 'Sus'])


@dataclass(frozen=True)
class Stadium:
    """Home venue for a team."""
    team: str
    name: str
    lat: float
    lng: float
    is_dome: bool
    is_retractable: bool
    timezone: str
    elevation: int  # feet


STADIUMS: Dict[str, Stadium] = {
    # AFC East
    'BUF': Stadium('BUF', 'Highmark Stadium', 42.7738, -78.7870, False, False, 'America/New_York', 597),
    'MIA': Stadium('MIA', 'Hard Rock Stadium', 25.9580, -80.2389, False, False, 'America/New_York', 7),
    'NE': Stadium('NE', 'Gillette Stadium', 42.0909, -71.2643, False, False, 'America/New_York', 256),
    'NYJ': Stadium('NYJ', 'MetLife Stadium', 40.8136, -74.0745, False, False, 'America/New_York', 7),
    # AFC North
    'BAL': Stadium('BAL', 'M&T Bank Stadium', 39.2780, -76.6227, False, False, 'America/New_York', 33),
    'CIN': Stadium('CIN', 'Paycor Stadium', 39.0954, -84.5160, False, False, 'America/New_York', 459),
    'CLE': Stadium('CLE', 'Cleveland Browns Stadium', 41.5061, -81.6995, False, False, 'America/New_York', 581),
    'PIT': Stadium('PIT', 'Acrisure Stadium', 40.4468, -80.0158, False, False, 'America/New_York', 748),
    # AFC South
    'HOU': Stadium('HOU', 'NRG Stadium', 29.6847, -95.4107, True, True, 'America/Chicago', 43),
    'IND': Stadium('IND', 'Lucas Oil Stadium', 39.7601, -86.1639, True, True, 'America/Indiana/Indianapolis', 715),
    'JAX': Stadium('JAX', 'EverBank Stadium', 30.3239, -81.6373, False, False, 'America/New_York', 10),
    'TEN': Stadium('TEN', 'Nissan Stadium', 36.1665, -86.7713, False, False, 'America/Chicago', 433),
    # AFC West
    'DEN': Stadium('DEN', 'Empower Field at Mile High', 39.7439, -105.0201, False, False, 'America/Denver', 5280),
    'KC': Stadium('KC', 'GEHA Field at Arrowhead Stadium', 39.0489, -94.4839, False, False, 'America/Chicago', 820),
    'LAC': Stadium('LAC', 'SoFi Stadium', 33.9535, -118.3392, True, False, 'America/Los_Angeles', 131),
    'LV': Stadium('LV', 'Allegiant Stadium', 36.0909, -115.1833, True, False, 'America/Los_Angeles', 2001),
    # NFC East
    'DAL': Stadium('DAL', 'AT&T Stadium', 32.7473, -97.0945, True, True, 'America/Chicago', 594),
    'NYG': Stadium('NYG', 'MetLife Stadium', 40.8136, -74.0745, False, False, 'America/New_York', 7),
    'PHI': Stadium('PHI', 'Lincoln Financial Field', 39.9008, -75.1675, False, False, 'America/New_York', 39),
    'WAS': Stadium('WAS', 'Northwest Stadium', 38.9076, -76.8645, False, False, 'America/New_York', 72),
    # NFC North
    'CHI': Stadium('CHI', 'Soldier Field', 41.8623, -87.6167, False, False, 'America/Chicago', 597),
    'DET': Stadium('DET', 'Ford Field', 42.3400, -83.0456, True, False, 'America/Detroit', 600),
    'GB': Stadium('GB', 'Lambeau Field', 44.5013, -88.0622, False, False, 'America/Chicago', 640),
    'MIN': Stadium('MIN', 'U.S. Bank Stadium', 44.9736, -93.2575, True, False, 'America/Chicago', 830),
    # NFC South
    'ATL': Stadium('ATL', 'Mercedes-Benz Stadium', 33.7553, -84.4006, True, True, 'America/New_York', 1050),
    'CAR': Stadium('CAR', 'Bank of America Stadium', 35.2258, -80.8528, False, False, 'America/New_York', 751),
    'NO': Stadium('NO', 'Caesars Superdome', 29.9511, -90.0812, True, False, 'America/Chicago', 3),
    'TB': Stadium('TB', 'Raymond James Stadium', 27.9759, -82.5033, False, False, 'America/New_York', 36),
    # NFC West
    'ARI': Stadium('ARI', 'State Farm Stadium', 33.5276, -112.2626, True, True, 'America/Phoenix', 1118),
    'LAR': Stadium('LAR', 'SoFi Stadium', 33.9535, -118.3392, True, False, 'America/Los_Angeles', 131),
    'SF': Stadium('SF', "Levi's Stadium", 37.4033, -121.9694, False, False, 'America/Los_Angeles', 43),
    'SEA': Stadium('SEA', 'Lumen Field', 47.5952, -122.3316, False, False, 'America/Los_Angeles', 20),
}

# Standard-time UTC offsets used for travel calculations
TIMEZONE_OFFSETS: Dict[str, int] = {
    'America/New_York': -5,
    'America/Indiana/Indianapolis': -5,
    'America/Detroit': -5,
    'America/Chicago': -6,
    'America/Denver': -7,
    'America/Phoenix': -7,
    'America/Los_Angeles': -8,
}

DIVISIONS: Dict[str, List[str]] = {
    'AFC_EAST': ['BUF', 'MIA', 'NE', 'NYJ'],
    'AFC_NORTH': ['BAL', 'CIN', 'CLE', 'PIT'],
    'AFC_SOUTH': ['HOU', 'IND', 'JAX', 'TEN'],
    'AFC_WEST': ['DEN', 'KC', 'LV', 'LAC'],
    'NFC_EAST': ['DAL', 'NYG', 'PHI', 'WAS'],
    'NFC_NORTH': ['CHI', 'DET', 'GB', 'MIN'],
    'NFC_SOUTH': ['ATL', 'CAR', 'NO', 'TB'],
    'NFC_WEST': ['ARI', 'LAR', 'SF', 'SEA'],
}

# Division matchups with extra volatility
INTENSE_RIVALRIES: FrozenSet[FrozenSet[str]] = frozenset(
    frozenset(pair) for pair in [
        ('BAL', 'PIT'),
        ('GB', 'CHI'),
        ('DAL', 'PHI'),
        ('DAL', 'NYG'),
        ('KC', 'LV'),
        ('SF', 'SEA'),
        ('NO', 'ATL'),
        ('DEN', 'LV'),
        ('NE', 'NYJ'),
        ('MIN', 'GB'),
    ]
)


def get_division(team: str) -> str:
    """Return the division key for a team, or '' if unknown."""
    for division, teams in DIVISIONS.items():
        if team in teams:
            return division
    return ''


def is_division_game(team: str, opponent: str) -> bool:
    division = get_division(team)
    return bool(division) and division == get_division(opponent)


def is_intense_rivalry(team: str, opponent: str) -> bool:
    return frozenset((team, opponent)) in INTENSE_RIVALRIES


def timezone_shift(from_team: str, to_team: str) -> int:
    """Hours of clock change travelling from one home stadium to another.

    Negative means travelling west.
    """
    origin = STADIUMS.get(from_team)
    destination = STADIUMS.get(to_team)
    if origin is None or destination is None:
        return 0
    return TIMEZONE_OFFSETS.get(destination.timezone, -5) - TIMEZONE_OFFSETS.get(origin.timezone, -5)


def is_indoor_venue(home_team: str) -> bool:
    """Dome or retractable roof."""
    stadium = STADIUMS.get(home_team)
    return bool(stadium and stadium.is_dome)


def to_eastern(kickoff: datetime) -> datetime:
    """Kickoff on the US Eastern clock. Naive datetimes are taken as UTC."""
    if kickoff.tzinfo is None:
        kickoff = pytz.utc.localize(kickoff)
    return kickoff.astimezone(US_EASTERN)
