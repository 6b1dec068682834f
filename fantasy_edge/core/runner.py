"""
Detector Fan-Out Runner

Runs every registered detector against the same (player, context, week)
on a thread pool. Detectors are independent, so they run concurrently;
results are collected back in registry order.

Failure isolation:
- A detector that raises is replaced by an empty, degraded result whose
  summary says the data is unavailable.
- A detector still running when the shared deadline passes is degraded
  the same way. Its thread is abandoned, not killed.
Every category is always present in the output.
"""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Dict, Iterable, List, Optional

from fantasy_edge.config import settings
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Player

logger = logging.getLogger(__name__)


def degraded_result(summary: str) -> DetectorResult:
    return DetectorResult(signals=[], summary=summary, degraded=True)


class DetectorRunner:
    """Concurrent, failure-isolated fan-out over a detector roster."""

    def __init__(
        self,
        detectors: Iterable[BaseDetector],
        max_workers: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            detectors: Detectors in registry order
            max_workers: Thread pool size (defaults to settings.MAX_DETECTOR_WORKERS)
            timeout: Seconds to wait for the whole fan-out (defaults to settings.DETECTOR_TIMEOUT_SECONDS)
        """
        self.detectors: List[BaseDetector] = list(detectors)
        self.max_workers = max_workers or settings.MAX_DETECTOR_WORKERS
        self.timeout = timeout if timeout is not None else settings.DETECTOR_TIMEOUT_SECONDS

    def run_all(self, player: Player, context: GameContext, week: int) -> Dict[str, DetectorResult]:
        """
        Run every detector and collect one result per category.

        Returns:
            Dict category -> DetectorResult, in registry order
        """
        if not self.detectors:
            return {}

        executor = ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(self.detectors)),
            thread_name_prefix="detector",
        )
        try:
            futures = [
                (detector, executor.submit(detector.analyze, player, context, week))
                for detector in self.detectors
            ]
            # One shared budget for the whole fan-out
            deadline = time.monotonic() + self.timeout
            results = {
                detector.category: self._collect(detector, future, deadline)
                for detector, future in futures
            }
        finally:
            # Do not block on detectors that timed out
            executor.shutdown(wait=False, cancel_futures=True)

        degraded = [category for category, result in results.items() if result.degraded]
        if degraded:
            logger.info(f"{len(degraded)}/{len(results)} detectors degraded: {', '.join(degraded)}")
        return results

    def _collect(self, detector: BaseDetector, future: Future, deadline: float) -> DetectorResult:
        try:
            return future.result(timeout=max(0.0, deadline - time.monotonic()))
        except FutureTimeoutError:
            future.cancel()
            logger.warning(f"Detector {detector.category} timed out after {self.timeout:g}s")
            return degraded_result(f"{detector.label} timed out after {self.timeout:g}s")
        except Exception as e:
            logger.warning(f"Detector {detector.category} failed: {e}")
            return degraded_result(f"{detector.label} data unavailable ({e})")
