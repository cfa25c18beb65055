"""Hop -- the public entry point.

Ties the history store, scoring engine, resolver, selector and
version-control provider together around one RepositoryContext.  The CLI
and library users go through ``Hop.open()``.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from hop.exceptions import VersionControlError
from hop.models.branch import RankedBranch
from hop.models.config import HopConfig
from hop.models.context import RepositoryContext
from hop.models.event import SwitchEvent
from hop.operations.resolve import CandidateResolver
from hop.operations.scoring import ScoringEngine, star_rating
from hop.operations.select import RankedSelector, Selection
from hop.operations.switch import SwitchCoordinator, SwitchOutcome
from hop.storage.file import FileHistoryStore
from hop.vcs.git import GitProvider

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from hop.hook import HookAction
    from hop.storage.store import HistoryStore
    from hop.vcs.provider import VersionControlProvider

logger = logging.getLogger(__name__)


class Hop:
    """Usage-learning branch switcher for one repository.

    Create via :meth:`Hop.open` (discovers the repository) or
    :meth:`Hop.from_components` (testing / DI).

    Example::

        hop = Hop.open()
        hop.record_switch("feature/login")
        outcome = hop.execute("login", dry_run=True)
        print(outcome.branch)
    """

    def __init__(
        self,
        *,
        context: RepositoryContext,
        store: HistoryStore,
        provider: VersionControlProvider,
        config: HopConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._context = context
        self._store = store
        self._provider = provider
        self._config = config
        self._clock = clock
        self._engine = ScoringEngine(store)
        self._resolver = CandidateResolver(store, provider)
        self._selector = RankedSelector(limit=config.max_results)
        self._coordinator = SwitchCoordinator(
            resolver=self._resolver,
            engine=self._engine,
            selector=self._selector,
            provider=provider,
            clock=clock,
        )

    @classmethod
    def open(
        cls,
        path: str | Path = ".",
        *,
        config: HopConfig | None = None,
        provider: VersionControlProvider | None = None,
    ) -> Hop:
        """Open the repository enclosing *path*.

        Raises:
            NotARepositoryError: If *path* is not inside a git repository.
        """
        config = config or HopConfig()
        context = RepositoryContext.discover(path, config=config)
        if provider is None:
            provider = GitProvider(context.root_path, git_executable=config.git_executable)
        return cls(
            context=context,
            store=FileHistoryStore(context.log_path),
            provider=provider,
            config=config,
        )

    @classmethod
    def from_components(
        cls,
        *,
        context: RepositoryContext,
        store: HistoryStore,
        provider: VersionControlProvider,
        config: HopConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> Hop:
        """Build a Hop from pre-built components."""
        return cls(
            context=context,
            store=store,
            provider=provider,
            config=config or HopConfig(),
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def context(self) -> RepositoryContext:
        return self._context

    @property
    def store(self) -> HistoryStore:
        return self._store

    @property
    def provider(self) -> VersionControlProvider:
        return self._provider

    @property
    def config(self) -> HopConfig:
        return self._config

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def now(self) -> float:
        return self._clock()

    def resolve(self, pattern: str | None = None) -> list[str]:
        """Candidate branch names for *pattern*, unranked."""
        return self._resolver.resolve(pattern)

    def score(self, branch: str, now: float | None = None) -> float:
        """Decayed usage score of *branch*."""
        return self._engine.score(branch, self.now() if now is None else now)

    def rank(self, candidates: Sequence[str], now: float | None = None) -> list[str]:
        """Order *candidates* by score, highest first, truncated."""
        now = self.now() if now is None else now
        scores = self._engine.scores(now)
        return self._selector.rank(candidates, lambda name, _now: scores.get(name, 0.0), now)

    def select(self, ranked: Sequence[str], *, list_only: bool = False) -> Selection:
        return self._selector.select(ranked, list_only=list_only)

    def current_branch(self) -> str | None:
        """Checked-out branch, or None if the provider cannot tell."""
        try:
            return self._provider.current_branch()
        except VersionControlError as exc:
            logger.warning("Cannot determine current branch: %s", exc)
            return None

    def ranked_branches(
        self,
        pattern: str | None = None,
        now: float | None = None,
    ) -> list[RankedBranch]:
        """Ranked candidates with scores, stars and the current-branch flag.

        Read-only: never touches the history log or the working tree.
        """
        ranked, scores = self._coordinator.ranked_candidates(pattern, now)
        return self.describe(ranked, scores)

    def describe(self, ranked: Sequence[str], scores: dict[str, float]) -> list[RankedBranch]:
        """Display rows for an already ranked list and its scores."""
        current = self.current_branch()
        return [
            RankedBranch(
                name=name,
                score=scores.get(name, 0.0),
                stars=star_rating(scores.get(name, 0.0)),
                is_current=(name == current),
            )
            for name in ranked
        ]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def execute(
        self,
        pattern: str | None = None,
        *,
        dry_run: bool = False,
        list_only: bool = False,
    ) -> SwitchOutcome:
        """Resolve *pattern*, pick a branch and switch to it.

        See :meth:`SwitchCoordinator.execute` for the exceptions raised.
        """
        return self._coordinator.execute(pattern, dry_run=dry_run, list_only=list_only)

    def switch_to(self, branch: str, *, dry_run: bool = False) -> SwitchOutcome:
        """Switch to an explicitly chosen branch."""
        return self._coordinator.switch_to(branch, dry_run=dry_run)

    def record_switch(self, branch: str, timestamp: int | None = None) -> SwitchEvent:
        """Append a switch event.  Called from the post-checkout hook.

        Raises:
            StoreIOError: If the history log cannot be written.
        """
        if timestamp is None:
            timestamp = int(self.now())
        event = SwitchEvent(timestamp=timestamp, branch=branch)
        self._store.append(event)
        return event

    def install_hook(self, *, force: bool = False, record_command: str | None = None) -> HookAction:
        from hop.hook import install_hook

        return install_hook(self._context, record_command=record_command, force=force)

    def uninstall_hook(self) -> HookAction:
        from hop.hook import uninstall_hook

        return uninstall_hook(self._context)

    def __repr__(self) -> str:
        return f"Hop(root={str(self._context.root_path)!r})"
