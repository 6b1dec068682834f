"""Team name normalization utilities"""

# Full names, provider-specific abbreviations and historical names to the
# abbreviation used throughout the package.
TEAM_ABBREVIATIONS = {
    "Arizona Cardinals": "ARI",
    "Atlanta Falcons": "ATL",
    "Baltimore Ravens": "BAL",
    "Buffalo Bills": "BUF",
    "Carolina Panthers": "CAR",
    "Chicago Bears": "CHI",
    "Cincinnati Bengals": "CIN",
    "Cleveland Browns": "CLE",
    "Dallas Cowboys": "DAL",
    "Denver Broncos": "DEN",
    "Detroit Lions": "DET",
    "Green Bay Packers": "GB",
    "Houston Texans": "HOU",
    "Indianapolis Colts": "IND",
    "Jacksonville Jaguars": "JAX",
    "Kansas City Chiefs": "KC",
    "Las Vegas Raiders": "LV",
    "Los Angeles Chargers": "LAC",
    "Los Angeles Rams": "LAR",
    "Miami Dolphins": "MIA",
    "Minnesota Vikings": "MIN",
    "New England Patriots": "NE",
    "New Orleans Saints": "NO",
    "New York Giants": "NYG",
    "New York Jets": "NYJ",
    "Philadelphia Eagles": "PHI",
    "Pittsburgh Steelers": "PIT",
    "San Francisco 49ers": "SF",
    "Seattle Seahawks": "SEA",
    "Tampa Bay Buccaneers": "TB",
    "Tennessee Titans": "TEN",
    "Washington Commanders": "WAS",

    # Provider variants
    "LA": "LAR",       # nflverse
    "WSH": "WAS",      # ESPN
    "JAC": "JAX",
    "OAK": "LV",
    "SD": "LAC",
    "STL": "LAR",

    # Historical names
    "Oakland Raiders": "LV",
    "St. Louis Rams": "LAR",
    "San Diego Chargers": "LAC",
    "Washington Redskins": "WAS",
    "Washington Football Team": "WAS",
}

NFL_TEAMS = sorted({abbr for abbr in TEAM_ABBREVIATIONS.values()})

_LOOKUP = {name.lower(): abbr for name, abbr in TEAM_ABBREVIATIONS.items()}
_LOOKUP.update({abbr.lower(): abbr for abbr in NFL_TEAMS})


def normalize_team_name(team_name):
    """
    Normalize team name to standard abbreviation.

    Handles:
    - Full team names ("Kansas City Chiefs" → "KC")
    - Abbreviations ("kc" → "KC")
    - Provider variants ("WSH" → "WAS", "LA" → "LAR")

    Args:
        team_name: Team name string (full or abbreviated)

    Returns:
        Standard abbreviation (uppercase), or "" if unrecognized

    Examples:
        >>> normalize_team_name("Kansas City Chiefs")
        'KC'
        >>> normalize_team_name("wsh")
        'WAS'
    """
    if not isinstance(team_name, str):
        return ""
    return _LOOKUP.get(team_name.strip().lower(), "")
