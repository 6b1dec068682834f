"""
Weather Impact Edge

Detects weather conditions that move fantasy output:
- Wind: hurts passing, especially deep balls, and kickers
- Cold: ball is harder to grip and catch
- Rain/Snow: lower passing efficiency, more fumbles
- Dome: controlled environment, slight boost

Each effect is scaled by how sensitive the player's position is
(see configs.edge_config.POSITION_WEATHER_SENSITIVITY).
"""

import logging

from configs.edge_config import (
    COLD_MAX_SEVERITY,
    COLD_SEVERITY_SCALE,
    COLD_THRESHOLD_F,
    PRECIP_HEAVY_IN,
    PRECIP_HIGH_PROBABILITY,
    PRECIP_LIGHT_IN,
    PRECIP_MODERATE_IN,
    PRECIP_PROBABILITY_TRIGGER,
    SNOW_MULTIPLIER,
    WIND_EXTREME_MPH,
    WIND_MODERATE_MPH,
    WIND_SEVERE_MPH,
    get_weather_sensitivity,
)
from fantasy_edge.constants import STADIUMS
from fantasy_edge.data.weather import GameWeather, WeatherClient
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def wind_severity(wind_speed: float) -> str:
    if wind_speed >= WIND_EXTREME_MPH:
        return 'Extreme'
    if wind_speed >= WIND_SEVERE_MPH:
        return 'Severe'
    return 'Moderate'


def wind_impact(wind_speed: float, position: str) -> int:
    """Wind magnitude (0 below the moderate threshold)."""
    if wind_speed < WIND_MODERATE_MPH:
        return 0
    sensitivity = get_weather_sensitivity(position).wind
    if wind_speed >= WIND_EXTREME_MPH:
        return round_half_up(-8 * sensitivity)
    if wind_speed >= WIND_SEVERE_MPH:
        return round_half_up(-5 * sensitivity)
    return round_half_up(-2 * sensitivity)


def cold_impact(temperature: float, position: str) -> int:
    """Cold magnitude, scaled by how far below freezing."""
    if temperature > COLD_THRESHOLD_F:
        return 0
    sensitivity = get_weather_sensitivity(position).cold
    severity = (COLD_THRESHOLD_F - temperature) / COLD_SEVERITY_SCALE
    return round_half_up(-3 * sensitivity * min(severity, COLD_MAX_SEVERITY))


def precip_impact(precipitation: float, probability: float, conditions: str, position: str) -> int:
    """Rain/snow magnitude. Snow is 1.5x worse."""
    if precipitation < PRECIP_LIGHT_IN and probability < PRECIP_PROBABILITY_TRIGGER:
        return 0
    sensitivity = get_weather_sensitivity(position).precip
    multiplier = SNOW_MULTIPLIER if 'snow' in conditions.lower() else 1.0
    if precipitation >= PRECIP_HEAVY_IN:
        return round_half_up(-6 * sensitivity * multiplier)
    if precipitation >= PRECIP_MODERATE_IN:
        return round_half_up(-4 * sensitivity * multiplier)
    return round_half_up(-2 * sensitivity * multiplier)


class WeatherDetector(BaseDetector):
    """Game-time weather at the home stadium."""

    category = "weather"
    label = "Weather"
    source = "open-meteo"

    def __init__(self, client: WeatherClient):
        self.client = client

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        home_team = context.home_team
        if not home_team:
            return self.empty("No team data")

        stadium = STADIUMS.get(home_team)
        if stadium is None:
            return self.empty("Unknown stadium")

        weather = self.client.get_game_weather(home_team, context.kickoff_time)
        if weather is None:
            return self.empty("Weather data unavailable")

        position = player.position.value

        if weather.is_dome:
            dome = self.signal(
                player, week, SignalType.WEATHER_DOME, Impact.POSITIVE,
                magnitude=1,
                confidence=95,
                short_description=f"Dome game at {stadium.name}",
                details="Climate-controlled environment eliminates weather variables. "
                        "Slight boost for passing game.",
                source="stadium_data",
            )
            return self.result([dome], "Dome game - no weather concerns")

        signals = []

        if weather.wind_speed >= WIND_MODERATE_MPH:
            magnitude = wind_impact(weather.wind_speed, position)
            signals.append(self.signal(
                player, week, SignalType.WEATHER_WIND, Impact.NEGATIVE,
                magnitude=magnitude,
                confidence=85,
                short_description=(
                    f"{wind_severity(weather.wind_speed)} wind: "
                    f"{weather.wind_speed} mph at {stadium.name}"
                ),
                details=self._wind_details(weather, position, magnitude),
            ))

        if weather.temperature <= COLD_THRESHOLD_F:
            magnitude = cold_impact(weather.temperature, position)
            signals.append(self.signal(
                player, week, SignalType.WEATHER_COLD,
                Impact.NEGATIVE if magnitude < -2 else Impact.NEUTRAL,
                magnitude=magnitude,
                confidence=70,
                short_description=f"Cold: {weather.temperature}°F at {stadium.name}",
                details=f"Temperature of {weather.temperature}°F. Ball is harder to grip and catch. "
                        "Players from warm-weather teams may struggle more.",
            ))

        magnitude = precip_impact(
            weather.precipitation, weather.precip_probability, weather.conditions, position
        )
        if magnitude < 0:
            is_snow = 'snow' in weather.conditions.lower()
            signals.append(self.signal(
                player, week, SignalType.WEATHER_PRECIP, Impact.NEGATIVE,
                magnitude=magnitude,
                confidence=80 if weather.precip_probability >= PRECIP_HIGH_PROBABILITY else 60,
                short_description=(
                    f"{'Snow' if is_snow else 'Rain'}: {weather.conditions} "
                    f"({weather.precip_probability}% chance)"
                ),
                details=f'Expected {weather.precipitation}" of precipitation. '
                        + ("Snow impacts footing and ball security. " if is_snow
                           else "Rain affects grip and passing accuracy. ")
                        + "Fumble risk increases.",
            ))

        negatives = [s for s in signals if s.impact == Impact.NEGATIVE]
        if not negatives:
            summary = "No significant weather concerns"
        else:
            concerns = ", ".join(s.short_description.split(':')[0] for s in negatives)
            total = sum(abs(s.magnitude) for s in negatives)
            summary = f"Weather alert: {concerns} (combined impact: -{total:g})"

        return self.result(signals, summary)

    @staticmethod
    def _wind_details(weather: GameWeather, position: str, magnitude: int) -> str:
        notes = {
            'QB': "Significantly reduces deep ball accuracy. ",
            'WR': "Deep routes less effective. ",
            'K': "Field goal range reduced. ",
        }
        return (
            f"Wind speed of {weather.wind_speed} mph from {weather.wind_direction}. "
            f"{notes.get(position, '')}"
            f"Historical data shows ~{abs(magnitude) * 2}% scoring reduction in these conditions."
        )
