"""
Edge Analyzer

Public entry point of the engine:

    resolve game context -> fan out to detectors -> aggregate -> recommend

Usage:
    analyzer = EdgeAnalyzer.default()
    analysis = analyzer.analyze_player("Josh Allen", week=18)
    ranked = analyzer.compare_players(["Josh Allen", "Lamar Jackson"])
"""

import logging
from typing import Iterable, List, Optional

from fantasy_edge.data.players import PlayerDirectory
from fantasy_edge.data.schedule import ScheduleService
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.edges.registry import DetectorRegistry, default_detectors
from fantasy_edge.exceptions import ProviderError, ResolutionError
from fantasy_edge.schemas import EdgeAnalysis

from .aggregator import aggregate
from .recommendation import recommend
from .resolver import GameContextResolver
from .runner import DetectorRunner

logger = logging.getLogger(__name__)


class EdgeAnalyzer:
    """Resolves, runs every detector and reduces to one EdgeAnalysis."""

    def __init__(
        self,
        resolver: GameContextResolver,
        detectors: Iterable[BaseDetector],
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        self.resolver = resolver
        self.registry = DetectorRegistry(list(detectors))
        self.runner = DetectorRunner(self.registry, max_workers=max_workers, timeout=timeout)

    @classmethod
    def default(cls) -> 'EdgeAnalyzer':
        """Analyzer wired to the live providers."""
        schedule = ScheduleService()
        resolver = GameContextResolver(PlayerDirectory(), schedule)
        return cls(resolver, default_detectors(schedule=schedule, espn=schedule.espn))

    def analyze_player(self, identity: str, week: Optional[int] = None) -> EdgeAnalysis:
        """
        Full edge analysis for one player.

        Args:
            identity: Player name or id
            week: Schedule week (defaults to the current week)

        Returns:
            EdgeAnalysis

        Raises:
            ResolutionError: Player, team or game could not be resolved
            ProviderError: Player directory or schedule unreachable
        """
        player, week, context = self.resolver.resolve(identity, week)
        logger.info(f"Analyzing {player.name} for week {week}")

        results = self.runner.run_all(player, context, week)

        # Registry order
        signals = [signal for result in results.values() for signal in result.signals]
        totals = aggregate(signals)
        recommendation = recommend(player, signals, totals.raw_impact, results)

        logger.info(
            f"{player.name}: {len(signals)} signals, impact {totals.overall_impact:+.1f}, "
            f"confidence {totals.confidence}%"
        )

        return EdgeAnalysis(
            player=player,
            week=week,
            context=context,
            summaries={category: result.summary for category, result in results.items()},
            labels={detector.category: detector.label for detector in self.registry},
            results=results,
            signals=signals,
            overall_impact=totals.overall_impact,
            confidence=totals.confidence,
            recommendation=recommendation,
        )

    def compare_players(self, identities: Iterable[str], week: Optional[int] = None) -> List[EdgeAnalysis]:
        """
        Analyze several players and rank them by overall impact, best first.

        Players that cannot be resolved, or whose lookup hits a provider
        outage, are skipped with a warning.
        """
        analyses = []
        for identity in identities:
            try:
                analyses.append(self.analyze_player(identity, week))
            except (ResolutionError, ProviderError) as e:
                logger.warning(f"Skipping {identity}: {e}")

        return sorted(analyses, key=lambda a: a.overall_impact, reverse=True)
