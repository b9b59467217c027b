"""Speculative one-shot cache for projection results.

A long-running host (the MCP server) can compute a projection before it is
asked for, typically for the first saved scenario at startup. The result is
held per scenario id and handed out at most once: take() always evicts, so
later requests recompute against the current scenario.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from .schemas import PredictionResult, ProjectionSettings

logger = logging.getLogger(__name__)


class PredictionCache:
    """Scenario-id keyed results, consumed on first lookup."""

    def __init__(self):
        self._entries: Dict[str, Tuple[ProjectionSettings, PredictionResult]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, scenario_id: str) -> bool:
        return scenario_id in self._entries

    def put(self, scenario_id: str, settings: ProjectionSettings, result: PredictionResult) -> None:
        """Store a result computed with the given settings."""
        with self._lock:
            self._entries[scenario_id] = (settings, result)
        logger.debug(f"cached projection for scenario {scenario_id}")

    def take(self, scenario_id: str, settings: ProjectionSettings) -> Optional[PredictionResult]:
        """Remove and return the cached result for a scenario.

        The entry is evicted whether or not it is returned. A result is only
        returned if it was computed with equal settings.

        Returns:
            Cached PredictionResult, or None on miss or settings mismatch
        """
        with self._lock:
            entry = self._entries.pop(scenario_id, None)

        if entry is None:
            return None

        cached_settings, result = entry
        if cached_settings != settings:
            logger.debug(f"discarded cached projection for scenario {scenario_id}: settings changed")
            return None

        logger.debug(f"returning cached projection for scenario {scenario_id}")
        return result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
