"""
Fantasy Edge Core Module

Resolver, detector runner, aggregator and recommendation generator that
together turn a player identity into one EdgeAnalysis.
"""

from .aggregator import Aggregate, aggregate
from .analyzer import EdgeAnalyzer
from .recommendation import recommend
from .report import format_analysis, format_comparison
from .resolver import GameContextResolver
from .runner import DetectorRunner

__all__ = [
    'Aggregate',
    'aggregate',
    'EdgeAnalyzer',
    'recommend',
    'format_analysis',
    'format_comparison',
    'GameContextResolver',
    'DetectorRunner',
]
