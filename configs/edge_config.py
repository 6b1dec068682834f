"""
Edge Configuration - Detector Thresholds

This module defines the thresholds, weights and caps for every edge
detector. Detectors self-calibrate against these values so that their
magnitudes stay on a shared scale (roughly -10 to +10) and the aggregate
can be a plain confidence-weighted sum.

Magnitude convention: negative = bad for fantasy scoring.
"""
from typing import Dict
from dataclasses import dataclass


# =============================================================================
# WEATHER
# =============================================================================

@dataclass(frozen=True)
class WeatherSensitivity:
    """How strongly a position reacts to each weather condition."""
    wind: float
    cold: float
    precip: float


WIND_MODERATE_MPH = 15
WIND_SEVERE_MPH = 20
WIND_EXTREME_MPH = 25

COLD_THRESHOLD_F = 32
COLD_SEVERITY_SCALE = 20      # degrees below threshold for full effect
COLD_MAX_SEVERITY = 1.5

PRECIP_LIGHT_IN = 0.1
PRECIP_MODERATE_IN = 0.25
PRECIP_HEAVY_IN = 0.5
PRECIP_PROBABILITY_TRIGGER = 50
PRECIP_HIGH_PROBABILITY = 70
SNOW_MULTIPLIER = 1.5

POSITION_WEATHER_SENSITIVITY: Dict[str, WeatherSensitivity] = {
    'QB': WeatherSensitivity(wind=0.9, cold=0.6, precip=0.8),
    'WR': WeatherSensitivity(wind=0.8, cold=0.5, precip=0.7),
    'TE': WeatherSensitivity(wind=0.5, cold=0.4, precip=0.5),
    'RB': WeatherSensitivity(wind=0.2, cold=0.3, precip=0.3),   # RBs barely care
    'K': WeatherSensitivity(wind=1.0, cold=0.7, precip=0.6),    # Kickers most affected by wind
    'DEF': WeatherSensitivity(wind=0.3, cold=0.2, precip=0.4),
}

DEFAULT_WEATHER_SENSITIVITY = WeatherSensitivity(wind=0.5, cold=0.5, precip=0.5)


# =============================================================================
# TRAVEL / REST
# =============================================================================

SHORT_WEEK_DAYS = 5
HIGH_ALTITUDE_FT = 5000
BYE_REST_DAYS = 14            # rest is capped at two weeks
STANDARD_REST_DAYS = 7
REST_EDGE_MIN_DIFF = 3


# =============================================================================
# OFFENSIVE LINE
# =============================================================================

# Higher = more impactful when missing
OL_POSITION_WEIGHTS: Dict[str, float] = {
    'LT': 1.0,   # Blindside protector
    'RT': 0.8,
    'C': 0.9,    # Line calls and snaps
    'LG': 0.6,
    'RG': 0.6,
    'T': 0.9,
    'G': 0.6,
    'OT': 0.9,
    'OG': 0.6,
}
DEFAULT_OL_WEIGHT = 0.5

OL_STATUS_SEVERITY: Dict[str, float] = {
    'Out': 1.0,
    'IR': 1.0,
    'Doubtful': 0.8,
    'Questionable': 0.4,
    'Probable': 0.1,
}

OL_SIGNIFICANT_SEVERITY = 0.4   # Questionable or worse
OL_MISSING_SEVERITY = 0.8       # Doubtful or worse counts as missing


# =============================================================================
# BETTING MARKETS
# =============================================================================

@dataclass(frozen=True)
class BettingThresholds:
    """Vegas thresholds for implied team totals, game totals and spreads."""
    high_implied: float = 26.0
    low_implied: float = 19.0
    high_total: float = 48.0
    low_total: float = 38.0
    blowout_spread: float = 14.0
    league_average_implied: float = 24.0


BETTING_THRESHOLDS = BettingThresholds()


# =============================================================================
# DEFENSE VS POSITION
# =============================================================================

@dataclass(frozen=True)
class MatchupTiers:
    """Rank cutoffs (1 = best defense, 32 = worst)."""
    smash: int = 28
    good: int = 22
    neutral: int = 12
    tough: int = 7


MATCHUP_TIERS = MatchupTiers()

# RB matchups are most predictive, WR matchups least (scheme/target dependent)
MATCHUP_POSITION_MULTIPLIER: Dict[str, float] = {
    'QB': 0.9,
    'RB': 1.2,
    'WR': 0.8,
    'TE': 1.0,
}


# =============================================================================
# OPPOSING DEFENSE INJURIES
# =============================================================================

@dataclass(frozen=True)
class DefenderBoost:
    """Boost to each offensive position when this defender is missing."""
    qb: float
    rb: float
    wr: float
    te: float

    def for_position(self, position: str) -> float:
        return {'QB': self.qb, 'RB': self.rb, 'WR': self.wr, 'TE': self.te}.get(position, 0.0)

    @property
    def max_boost(self) -> float:
        return max(self.qb, self.rb, self.wr, self.te)


DEFENDER_BOOSTS: Dict[str, DefenderBoost] = {
    # Cornerbacks - huge impact on WRs
    'CB': DefenderBoost(qb=0.3, rb=0.0, wr=1.0, te=0.2),
    # Safeties - moderate impact across passing game
    'S': DefenderBoost(qb=0.3, rb=0.2, wr=0.5, te=0.6),
    'FS': DefenderBoost(qb=0.3, rb=0.1, wr=0.6, te=0.5),
    'SS': DefenderBoost(qb=0.2, rb=0.3, wr=0.4, te=0.5),
    'DB': DefenderBoost(qb=0.3, rb=0.1, wr=0.7, te=0.4),
    # Linebackers - TEs and RBs
    'LB': DefenderBoost(qb=0.2, rb=0.6, wr=0.2, te=0.8),
    'MLB': DefenderBoost(qb=0.2, rb=0.7, wr=0.1, te=0.7),
    'ILB': DefenderBoost(qb=0.2, rb=0.7, wr=0.1, te=0.7),
    'OLB': DefenderBoost(qb=0.5, rb=0.4, wr=0.2, te=0.5),
    # Defensive line - pass rush affects QB, interior affects RB
    'DE': DefenderBoost(qb=0.8, rb=0.3, wr=0.4, te=0.2),
    'DT': DefenderBoost(qb=0.4, rb=0.9, wr=0.2, te=0.1),
    'NT': DefenderBoost(qb=0.2, rb=1.0, wr=0.1, te=0.1),
    'DL': DefenderBoost(qb=0.5, rb=0.6, wr=0.3, te=0.2),
    'EDGE': DefenderBoost(qb=0.9, rb=0.2, wr=0.4, te=0.2),
}

DEFENDER_STATUS_WEIGHTS: Dict[str, float] = {
    'Out': 1.0,
    'IR': 1.0,
    'Doubtful': 0.8,
    'Questionable': 0.3,   # Many play
    'Probable': 0.05,
}

# Sleeper statuses folded onto the weights above
SLEEPER_STATUS_MAP: Dict[str, str] = {
    'Out': 'Out',
    'IR': 'IR',
    'Doubtful': 'Doubtful',
    'Questionable': 'Questionable',
    'PUP': 'IR',
    'Sus': 'Out',
}

DEFENDER_MIN_STATUS_WEIGHT = 0.3
DEFENDER_KEY_BOOST = 0.7
DEFENDER_BOOST_CAP = 5.0


# =============================================================================
# USAGE
# =============================================================================

@dataclass(frozen=True)
class ShareThresholds:
    """Share (percent) thresholds for one usage metric."""
    elite: float
    strong: float
    weak: float


TARGET_SHARE_THRESHOLDS = ShareThresholds(elite=30.0, strong=25.0, weak=12.0)
CARRY_SHARE_THRESHOLDS = ShareThresholds(elite=75.0, strong=65.0, weak=40.0)

USAGE_LOOKBACK_WEEKS = 3
TREND_UP_RATIO = 1.15
TREND_DOWN_RATIO = 0.85


# =============================================================================
# CONTRACT / NARRATIVE
# =============================================================================

INCENTIVE_MIN_WEEK = 17
INCENTIVE_NEAR_THRESHOLD_PCT = 0.05


# =============================================================================
# SITUATIONAL SPLITS
# =============================================================================

@dataclass(frozen=True)
class SplitRule:
    """When a performance split becomes a signal and how big it can get."""
    min_pct: float          # Minimum |split| percent to flag
    max_magnitude: float    # Magnitude cap
    base_confidence: int
    confidence_per_game: int
    max_confidence: int
    min_games: int = 0


HOME_AWAY_RULE = SplitRule(min_pct=20.0, max_magnitude=4.0, base_confidence=50,
                           confidence_per_game=2, max_confidence=80)
PRIMETIME_RULE = SplitRule(min_pct=15.0, max_magnitude=3.0, base_confidence=50,
                           confidence_per_game=4, max_confidence=75, min_games=3)
INDOOR_OUTDOOR_RULE = SplitRule(min_pct=15.0, max_magnitude=3.0, base_confidence=60,
                                confidence_per_game=0, max_confidence=60)


def split_confidence(rule: SplitRule, games: int) -> int:
    """Confidence grows with sample size up to the rule's cap."""
    return min(rule.max_confidence, rule.base_confidence + games * rule.confidence_per_game)


def split_magnitude(rule: SplitRule, pct: float, favorable: bool) -> float:
    """Signed magnitude for a split of pct percent."""
    size = min(rule.max_magnitude, abs(pct) / 10)
    return size if favorable else -size


def get_weather_sensitivity(position: str) -> WeatherSensitivity:
    return POSITION_WEATHER_SENSITIVITY.get(position, DEFAULT_WEATHER_SENSITIVITY)
