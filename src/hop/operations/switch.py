"""Switch orchestration for Hop.

SwitchCoordinator runs the full flow: resolve candidates, rank them, apply
the selection policy, validate the target and finally check it out.  The
only external mutation is the provider's ``checkout``, and only when not in
dry-run mode and the target is not already checked out.
"""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hop.exceptions import BranchNotFoundError, CheckoutFailedError, NoMatchError
from hop.operations.select import SelectionKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from hop.operations.resolve import CandidateResolver
    from hop.operations.scoring import ScoringEngine
    from hop.operations.select import RankedSelector
    from hop.vcs.provider import VersionControlProvider

logger = logging.getLogger(__name__)


class SwitchStatus(str, enum.Enum):
    """Terminal state of a switch."""

    SWITCHED = "switched"
    ALREADY_CURRENT = "already_current"
    DRY_RUN = "dry_run"
    LISTED = "listed"


@dataclass(frozen=True)
class SwitchOutcome:
    """Result of :meth:`SwitchCoordinator.execute`.

    Attributes:
        status: What happened.
        branch: The selected branch (None when LISTED).
        candidates: Ranked candidates, highest score first.
        scores: Score of each candidate, from the same log read as the ranking.
        multiple_matches: True when the branch was auto-picked from several.
    """

    status: SwitchStatus
    branch: str | None
    candidates: list[str] = field(default_factory=list)
    multiple_matches: bool = False
    scores: dict[str, float] = field(default_factory=dict)


class SwitchCoordinator:
    """Resolve, rank, select and switch."""

    def __init__(
        self,
        *,
        resolver: CandidateResolver,
        engine: ScoringEngine,
        selector: RankedSelector,
        provider: VersionControlProvider,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._resolver = resolver
        self._engine = engine
        self._selector = selector
        self._provider = provider
        self._clock = clock

    def ranked_candidates(
        self, pattern: str | None, now: float | None = None
    ) -> tuple[list[str], dict[str, float]]:
        """Resolve *pattern*, rank the result and return it with its scores."""
        if now is None:
            now = self._clock()
        candidates = self._resolver.resolve(pattern)
        scores = self._engine.scores(now)
        ranked = self._selector.rank(
            candidates, lambda name, _now: scores.get(name, 0.0), now
        )
        return ranked, {name: scores.get(name, 0.0) for name in ranked}

    def execute(
        self,
        pattern: str | None = None,
        *,
        dry_run: bool = False,
        list_only: bool = False,
        now: float | None = None,
    ) -> SwitchOutcome:
        """Run the switch flow for *pattern*.

        Raises:
            NoMatchError: No candidates (with no pattern: no tracked branches).
            BranchNotFoundError: The selected branch no longer exists.
            CheckoutFailedError: The provider could not switch.
        """
        ranked, scores = self.ranked_candidates(pattern, now)
        selection = self._selector.select(ranked, list_only=list_only)

        if selection.kind is SelectionKind.NONE:
            raise NoMatchError(pattern)
        if selection.kind is SelectionKind.LIST:
            return SwitchOutcome(
                SwitchStatus.LISTED, None, selection.candidates, scores=scores
            )

        assert selection.branch is not None
        if selection.multiple_matches:
            logger.info(
                "%d branches match %r, using most used: %s",
                len(selection.candidates), pattern, selection.branch,
            )
        return self.switch_to(
            selection.branch,
            dry_run=dry_run,
            candidates=selection.candidates,
            multiple_matches=selection.multiple_matches,
            scores=scores,
        )

    def switch_to(
        self,
        branch: str,
        *,
        dry_run: bool = False,
        candidates: list[str] | None = None,
        multiple_matches: bool = False,
        scores: dict[str, float] | None = None,
    ) -> SwitchOutcome:
        """Validate *branch* and check it out unless dry-run or current."""
        candidates = candidates if candidates is not None else [branch]

        if not self._provider.branch_exists(branch):
            raise BranchNotFoundError(branch)

        def outcome(status: SwitchStatus) -> SwitchOutcome:
            return SwitchOutcome(status, branch, candidates, multiple_matches, scores or {})

        if self._provider.current_branch() == branch:
            return outcome(SwitchStatus.ALREADY_CURRENT)
        if dry_run:
            return outcome(SwitchStatus.DRY_RUN)

        if not self._provider.checkout(branch):
            raise CheckoutFailedError(branch, getattr(self._provider, "last_error", ""))
        logger.debug("Switched to %s", branch)
        return outcome(SwitchStatus.SWITCHED)
