"""Upstream data providers and lookup services."""

from fantasy_edge.data.espn import EspnClient
from fantasy_edge.data.nflverse import NflverseClient
from fantasy_edge.data.odds import GameOdds, OddsClient
from fantasy_edge.data.players import PlayerDirectory
from fantasy_edge.data.schedule import ScheduleEntry, ScheduleService
from fantasy_edge.data.sleeper import SleeperClient
from fantasy_edge.data.weather import GameWeather, WeatherClient

__all__ = [
    'EspnClient',
    'GameOdds',
    'GameWeather',
    'NflverseClient',
    'OddsClient',
    'PlayerDirectory',
    'ScheduleEntry',
    'ScheduleService',
    'SleeperClient',
    'WeatherClient',
]
