"""Fantasy Edge Signal Engine.

Resolves a player's game for a week, runs fifteen independent situational
detectors (weather, travel, OL health, Vegas lines, matchups, usage,
narratives, splits) and reduces their signals to one explainable verdict.
"""

__version__ = "0.1.0"
__author__ = "Fantasy Edge Team"

from fantasy_edge.core.analyzer import EdgeAnalyzer
from fantasy_edge.schemas import EdgeAnalysis, EdgeSignal

__all__ = ["EdgeAnalyzer", "EdgeAnalysis", "EdgeSignal"]
