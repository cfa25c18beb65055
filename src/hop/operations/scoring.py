"""Usage scoring for Hop.

Every recorded switch contributes ``exp(-age / HALF_LIFE_SECONDS)`` to its
branch's score, so frequent and recent switches dominate.  Scores are
recomputed from the full log on every query.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hop.storage.store import HistoryStore

logger = logging.getLogger(__name__)

# Decay time constant (7 days).  Weight is exp(-age / 604800), not a
# halving every week.
HALF_LIFE_SECONDS = 604800

# Star-rating thresholds, highest first: (minimum score, stars).
_STAR_THRESHOLDS: tuple[tuple[float, int], ...] = ((3.0, 3), (1.0, 2))


def event_weight(timestamp: int, now: int | float) -> float:
    """Decayed weight of one switch event.

    Future timestamps (clock skew) are treated as age 0 so no single event
    weighs more than 1.
    """
    age = max(0.0, now - timestamp)
    return math.exp(-age / HALF_LIFE_SECONDS)


def star_rating(score: float) -> int:
    """Map a score to 0-3 display stars."""
    for minimum, stars in _STAR_THRESHOLDS:
        if score >= minimum:
            return stars
    return 1 if score > 0 else 0


class ScoringEngine:
    """Compute decayed usage scores from a HistoryStore."""

    def __init__(self, store: HistoryStore) -> None:
        self._store = store

    def score(self, branch: str, now: int | float) -> float:
        """Score of *branch* at time *now*.  Zero for untracked branches."""
        total = 0.0
        for event in self._store.iterate():
            if event.branch == branch:
                total += event_weight(event.timestamp, now)
        return total

    def scores(self, now: int | float) -> dict[str, float]:
        """Scores for every tracked branch, computed in one pass."""
        totals: dict[str, float] = {}
        for event in self._store.iterate():
            totals[event.branch] = totals.get(event.branch, 0.0) + event_weight(
                event.timestamp, now
            )
        logger.debug("Scored %d tracked branches", len(totals))
        return totals
