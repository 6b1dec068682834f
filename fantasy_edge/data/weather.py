"""
Open-Meteo Weather Client

Free, keyless hourly forecasts. For a game we look at the three hours from
the kickoff hour (stadium local time) and keep the worst values: lowest
temperature, strongest wind, heaviest precipitation.

Fixed domes never hit the API; retractable roofs are forecast like open-air
stadiums since the roof decision is made on game day.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

import pytz
import requests

from fantasy_edge.cache import TTLCache
from fantasy_edge.config import settings
from fantasy_edge.constants import STADIUMS
from fantasy_edge.data.http import get_json
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

GAME_WINDOW_HOURS = 3
DOME_TEMPERATURE_F = 72

HOURLY_FIELDS = (
    "temperature_2m,precipitation,precipitation_probability,"
    "weather_code,wind_speed_10m,wind_direction_10m"
)

WMO_CONDITIONS: Dict[int, str] = {
    0: 'Clear',
    1: 'Mainly Clear',
    2: 'Partly Cloudy',
    3: 'Overcast',
    45: 'Fog',
    48: 'Rime Fog',
    51: 'Light Drizzle',
    53: 'Drizzle',
    55: 'Heavy Drizzle',
    61: 'Light Rain',
    63: 'Rain',
    65: 'Heavy Rain',
    66: 'Freezing Rain',
    67: 'Heavy Freezing Rain',
    71: 'Light Snow',
    73: 'Snow',
    75: 'Heavy Snow',
    77: 'Snow Grains',
    80: 'Light Showers',
    81: 'Showers',
    82: 'Heavy Showers',
    85: 'Light Snow Showers',
    86: 'Heavy Snow Showers',
    95: 'Thunderstorm',
    96: 'Thunderstorm with Hail',
    99: 'Thunderstorm with Heavy Hail',
}

COMPASS_POINTS = [
    'N', 'NNE', 'NE', 'ENE', 'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW', 'W', 'WNW', 'NW', 'NNW',
]


@dataclass(frozen=True)
class GameWeather:
    """Worst-case conditions over the game window."""
    stadium: str
    is_dome: bool
    temperature: int            # Fahrenheit
    wind_speed: int             # mph
    wind_direction: str
    precipitation: float        # inches
    precip_probability: int     # percent
    conditions: str


def weather_code_to_conditions(code: Optional[int]) -> str:
    return WMO_CONDITIONS.get(code, 'Unknown') if code is not None else 'Unknown'


def degrees_to_direction(degrees: float) -> str:
    """16-point compass heading for a wind direction in degrees."""
    index = round_half_up((degrees % 360) / 22.5) % 16
    return COMPASS_POINTS[index]


def _localize(kickoff: datetime, tz_name: str) -> datetime:
    tz = pytz.timezone(tz_name)
    if kickoff.tzinfo is None:
        kickoff = pytz.utc.localize(kickoff)
    return kickoff.astimezone(tz)


def summarize_window(hourly: Dict[str, Any], kickoff_hour: int) -> Optional[Dict[str, Any]]:
    """
    Reduce an Open-Meteo hourly block to worst-case values.

    Returns:
        Dict of raw worst values, or None if the kickoff hour is missing
    """
    times = hourly.get('time') or []
    start = next(
        (i for i, t in enumerate(times) if datetime.fromisoformat(t).hour == kickoff_hour),
        None,
    )
    if start is None:
        return None
    end = min(start + GAME_WINDOW_HOURS, len(times))

    max_precip = 0.0
    max_prob = 0
    max_wind = 0.0
    min_temp = 999.0
    worst_code = 0
    worst_dir = 0.0

    for i in range(start, end):
        precip = hourly['precipitation'][i] or 0.0
        if precip > max_precip:
            max_precip = precip
            worst_code = hourly['weather_code'][i]
        max_prob = max(max_prob, hourly['precipitation_probability'][i] or 0)
        wind = hourly['wind_speed_10m'][i] or 0.0
        if wind > max_wind:
            max_wind = wind
            worst_dir = hourly['wind_direction_10m'][i] or 0.0
        temp = hourly['temperature_2m'][i]
        if temp is not None:
            min_temp = min(min_temp, temp)

    return {
        'temperature': min_temp,
        'wind_speed': max_wind,
        'wind_direction': worst_dir,
        'precipitation': max_precip,
        'precip_probability': max_prob,
        'weather_code': worst_code,
    }


class WeatherClient:
    """Game-time forecasts for NFL stadiums."""

    def __init__(self, cache: Optional[TTLCache] = None, session: Optional[requests.Session] = None):
        self.cache = cache or TTLCache(settings.WEATHER_CACHE_TTL)
        self.session = session

    def get_game_weather(self, home_team: str, kickoff: datetime) -> Optional[GameWeather]:
        """
        Forecast for a game at the home team's stadium.

        Returns:
            GameWeather, or None for unknown stadiums / missing forecast hours

        Raises:
            ProviderError: If Open-Meteo is unreachable
        """
        stadium = STADIUMS.get(home_team)
        if stadium is None:
            logger.warning(f"Unknown team for weather: {home_team}")
            return None

        if stadium.is_dome and not stadium.is_retractable:
            return GameWeather(
                stadium=stadium.name,
                is_dome=True,
                temperature=DOME_TEMPERATURE_F,
                wind_speed=0,
                wind_direction='N/A',
                precipitation=0.0,
                precip_probability=0,
                conditions='Dome',
            )

        local_kickoff = _localize(kickoff, stadium.timezone)
        cache_key = (home_team, local_kickoff.strftime('%Y-%m-%dT%H'))
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Weather cache hit: {cache_key}")
            return cached

        date_str = local_kickoff.strftime('%Y-%m-%d')
        logger.info(f"Fetching weather for {stadium.name} on {date_str} from Open-Meteo")
        data = get_json(
            "open-meteo",
            settings.OPEN_METEO_URL,
            params={
                'latitude': stadium.lat,
                'longitude': stadium.lng,
                'hourly': HOURLY_FIELDS,
                'temperature_unit': 'fahrenheit',
                'wind_speed_unit': 'mph',
                'precipitation_unit': 'inch',
                'timezone': stadium.timezone,
                'start_date': date_str,
                'end_date': date_str,
            },
            session=self.session,
        )

        window = summarize_window((data or {}).get('hourly') or {}, local_kickoff.hour)
        if window is None:
            logger.warning(f"No forecast for kickoff hour {local_kickoff.hour} at {stadium.name}")
            return None

        result = GameWeather(
            stadium=stadium.name,
            is_dome=False,
            temperature=round_half_up(window['temperature']),
            wind_speed=round_half_up(window['wind_speed']),
            wind_direction=degrees_to_direction(window['wind_direction']),
            precipitation=window['precipitation'],
            precip_probability=int(window['precip_probability']),
            conditions=weather_code_to_conditions(window['weather_code']),
        )
        self.cache.set(cache_key, result)
        return result
