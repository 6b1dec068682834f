"""
Base Detector Class

Abstract base class for edge detectors.
All detectors (weather, travel, OL health, betting, ...) inherit from this.

Contract:
- analyze() is a function of (player, context, week) plus whatever the
  detector's own providers return.
- "No data" and "not applicable" are normal results: empty signals and an
  explanatory summary. Never raise for them.
- Provider failures (ProviderError) propagate; the runner degrades them.
- Magnitudes are self-calibrated to roughly -10..+10.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Optional

from fantasy_edge.schemas import (
    DetectorResult,
    EdgeSignal,
    GameContext,
    Impact,
    Player,
    SignalType,
)


class BaseDetector(ABC):
    """
    Abstract base class for edge detectors.

    Subclasses set:
    - category: registry key (e.g. "weather")
    - label: display name in reports (e.g. "Weather")
    - source: provenance tag stamped on every signal
    """

    category: str = ""
    label: str = ""
    source: str = ""

    @abstractmethod
    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        """
        Analyze one player's matchup.

        Args:
            player: Resolved player
            context: Resolved game context (read-only)
            week: Schedule week

        Returns:
            DetectorResult with zero or more signals and a summary
        """
        pass

    def signal(
        self,
        player: Player,
        week: int,
        type: SignalType,
        impact: Impact,
        magnitude: float,
        confidence: float,
        short_description: str,
        details: str = "",
        source: Optional[str] = None,
    ) -> EdgeSignal:
        """Build a signal stamped with this detector's subject, week and source."""
        return EdgeSignal(
            type=type,
            subject_id=player.id,
            week=week,
            impact=impact,
            magnitude=magnitude,
            confidence=confidence,
            short_description=short_description,
            details=details,
            source=source or self.source,
            timestamp=datetime.now(),
        )

    @staticmethod
    def result(signals: List[EdgeSignal], summary: str, **flags: Any) -> DetectorResult:
        return DetectorResult(signals=signals, summary=summary, flags=flags)

    @staticmethod
    def empty(summary: str, **flags: Any) -> DetectorResult:
        """No finding."""
        return DetectorResult(signals=[], summary=summary, flags=flags)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(category={self.category!r})"
