"""
Fantasy Edge Detection Module

Fifteen independent detectors, each looking at one situational factor
(weather, travel, OL health, Vegas lines, matchups, usage, narratives,
splits). Every detector returns a DetectorResult; the core runner fans
out over the registry and the aggregator reduces the signals.
"""

from .base_edge import BaseDetector
from .ol_injury_edge import ol_fantasy_impact
from .registry import DetectorRegistry, default_detectors

__all__ = [
    'BaseDetector',
    'DetectorRegistry',
    'default_detectors',
    'ol_fantasy_impact',
]
