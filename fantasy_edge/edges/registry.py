"""
Detector Registry

Holds the detector roster in its fixed order. The order is part of the
output contract: per-category summaries and the concatenated signal list
follow it, and the report prints categories in this order.

Usage:
    registry = DetectorRegistry(default_detectors())
    for detector in registry:
        ...
"""

import logging
from typing import Dict, Iterator, List, Optional

from fantasy_edge.data.espn import EspnClient
from fantasy_edge.data.nflverse import NflverseClient
from fantasy_edge.data.odds import OddsClient
from fantasy_edge.data.schedule import ScheduleService
from fantasy_edge.data.sleeper import SleeperClient
from fantasy_edge.data.weather import WeatherClient

from .base_edge import BaseDetector
from .betting_edge import BettingDetector
from .contract_incentive_edge import ContractIncentiveDetector
from .defense_matchup_edge import DefenseMatchupDetector
from .division_rivalry_edge import DivisionRivalryDetector
from .home_away_edge import HomeAwayDetector
from .indoor_outdoor_edge import IndoorOutdoorDetector
from .ol_injury_edge import OlInjuryDetector
from .opposing_injuries_edge import OpposingInjuriesDetector
from .primetime_edge import PrimetimeDetector
from .red_zone_edge import RedZoneDetector
from .rest_advantage_edge import RestAdvantageDetector
from .revenge_game_edge import RevengeGameDetector
from .travel_edge import TravelDetector
from .usage_trend_edge import UsageTrendDetector
from .weather_edge import WeatherDetector

logger = logging.getLogger(__name__)


def default_detectors(
    schedule: Optional[ScheduleService] = None,
    weather: Optional[WeatherClient] = None,
    espn: Optional[EspnClient] = None,
    odds: Optional[OddsClient] = None,
    sleeper: Optional[SleeperClient] = None,
    nflverse: Optional[NflverseClient] = None,
) -> List[BaseDetector]:
    """
    Build the full detector roster in registry order.

    Any provider not passed in is created with default settings. The
    schedule service shares the ESPN client so both use one cache.
    """
    espn = espn or EspnClient()
    schedule = schedule or ScheduleService(espn=espn)
    weather = weather or WeatherClient()
    odds = odds or OddsClient()
    sleeper = sleeper or SleeperClient()
    nflverse = nflverse or NflverseClient()

    return [
        WeatherDetector(weather),
        TravelDetector(schedule),
        OlInjuryDetector(espn),
        BettingDetector(odds),
        DefenseMatchupDetector(),
        OpposingInjuriesDetector(sleeper),
        UsageTrendDetector(nflverse),
        ContractIncentiveDetector(),
        RevengeGameDetector(),
        RedZoneDetector(),
        HomeAwayDetector(nflverse),
        PrimetimeDetector(nflverse),
        DivisionRivalryDetector(),
        RestAdvantageDetector(schedule),
        IndoorOutdoorDetector(nflverse),
    ]


class DetectorRegistry:
    """Ordered, category-keyed collection of detectors."""

    def __init__(self, detectors: List[BaseDetector]):
        self._detectors: Dict[str, BaseDetector] = {}
        for detector in detectors:
            if not detector.category:
                raise ValueError(f"{detector!r} has no category")
            if detector.category in self._detectors:
                raise ValueError(f"Duplicate detector category: {detector.category}")
            self._detectors[detector.category] = detector
        logger.debug(f"Registered {len(self._detectors)} detectors: {', '.join(self.categories)}")

    @property
    def categories(self) -> List[str]:
        return list(self._detectors)

    def get(self, category: str) -> Optional[BaseDetector]:
        return self._detectors.get(category)

    def label(self, category: str) -> str:
        detector = self._detectors.get(category)
        return detector.label if detector else category

    def __iter__(self) -> Iterator[BaseDetector]:
        return iter(self._detectors.values())

    def __len__(self) -> int:
        return len(self._detectors)

    def __contains__(self, category: str) -> bool:
        return category in self._detectors
