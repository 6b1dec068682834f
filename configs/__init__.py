"""
Fantasy Edge Configuration Package.

Detector thresholds live in edge_config.py; static reference tables
(defense rankings, contract incentives, revenge games, red zone usage)
are YAML files beside it.
"""
from pathlib import Path

from configs.edge_config import (
    # Weather
    WeatherSensitivity,
    get_weather_sensitivity,
    # Betting / matchup
    BETTING_THRESHOLDS,
    MATCHUP_TIERS,
    MATCHUP_POSITION_MULTIPLIER,
    # Injuries
    OL_POSITION_WEIGHTS,
    OL_STATUS_SEVERITY,
    DEFENDER_BOOSTS,
    DEFENDER_STATUS_WEIGHTS,
    # Splits
    SplitRule,
    HOME_AWAY_RULE,
    PRIMETIME_RULE,
    INDOOR_OUTDOOR_RULE,
)

CONFIGS_DIR = Path(__file__).parent

__all__ = [
    'CONFIGS_DIR',
    'WeatherSensitivity',
    'get_weather_sensitivity',
    'BETTING_THRESHOLDS',
    'MATCHUP_TIERS',
    'MATCHUP_POSITION_MULTIPLIER',
    'OL_POSITION_WEIGHTS',
    'OL_STATUS_SEVERITY',
    'DEFENDER_BOOSTS',
    'DEFENDER_STATUS_WEIGHTS',
    'SplitRule',
    'HOME_AWAY_RULE',
    'PRIMETIME_RULE',
    'INDOOR_OUTDOOR_RULE',
]
