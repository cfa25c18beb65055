"""Candidate resolution for Hop.

Builds the ordered, duplicate-free list of branch names a pattern could
mean.  Tracked names (from the history log) come first, then live branches
from the version-control provider.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hop.exceptions import VersionControlError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hop.storage.store import HistoryStore
    from hop.vcs.provider import VersionControlProvider

logger = logging.getLogger(__name__)


def matches(branch: str, pattern: str) -> bool:
    """Case-insensitive substring match."""
    return pattern.lower() in branch.lower()


def dedupe(names: Iterable[str]) -> list[str]:
    """Drop repeated names, keeping the first occurrence."""
    return list(dict.fromkeys(names))


class CandidateResolver:
    """Resolve an optional pattern to candidate branch names."""

    def __init__(self, store: HistoryStore, provider: VersionControlProvider) -> None:
        self._store = store
        self._provider = provider

    def resolve(self, pattern: str | None = None) -> list[str]:
        """Return candidates for *pattern*.

        With no pattern, every tracked branch in log order; no live-branch
        fallback, so an empty log gives an empty list.  With a pattern,
        matching tracked branches followed by matching live branches.
        """
        tracked = self._store.distinct_branch_names()
        if not pattern:
            return tracked

        candidates = [name for name in tracked if matches(name, pattern)]
        candidates.extend(name for name in self._live_branches() if matches(name, pattern))
        result = dedupe(candidates)
        logger.debug("Pattern %r resolved to %d candidates", pattern, len(result))
        return result

    def _live_branches(self) -> list[str]:
        try:
            return list(self._provider.list_branches())
        except (VersionControlError, OSError) as exc:
            logger.warning("Cannot list branches, using tracked history only: %s", exc)
            return []
