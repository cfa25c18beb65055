"""Shared test fixtures for Hop.

Provides an in-memory version-control fake, history stores and a
fake repository directory.
"""

from __future__ import annotations

import pytest

from hop.exceptions import VersionControlError
from hop.hop import Hop
from hop.models.config import HopConfig
from hop.models.context import RepositoryContext
from hop.models.event import SwitchEvent
from hop.storage.file import FileHistoryStore
from hop.storage.store import MemoryHistoryStore

NOW = 1_700_000_000
DAY = 86_400


class FakeProvider:
    """In-memory VersionControlProvider seeded with a fixed branch set."""

    def __init__(
        self,
        branches: list[str] | None = None,
        current: str = "main",
        *,
        fail_checkout: bool = False,
        fail_list: bool = False,
    ) -> None:
        self.branches = list(branches if branches is not None else ["main"])
        self.current = current
        self.fail_checkout = fail_checkout
        self.fail_list = fail_list
        self.checkouts: list[str] = []
        self.list_calls = 0
        self.last_error = ""

    def list_branches(self) -> list[str]:
        self.list_calls += 1
        if self.fail_list:
            raise VersionControlError("git exploded")
        return list(self.branches)

    def current_branch(self) -> str:
        return self.current

    def branch_exists(self, name: str) -> bool:
        return name in self.branches

    def checkout(self, name: str) -> bool:
        self.checkouts.append(name)
        if self.fail_checkout:
            self.last_error = "Your local changes would be overwritten by checkout"
            return False
        self.current = name
        return True


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider(["main", "develop", "feature/login", "feature/logout", "bugfix/LOGIN-crash"])


@pytest.fixture
def memory_store() -> MemoryHistoryStore:
    return MemoryHistoryStore()


@pytest.fixture
def repo_dir(tmp_path):
    """A directory that looks like a git working tree (bare ``.git`` dir)."""
    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def context(repo_dir) -> RepositoryContext:
    return RepositoryContext.discover(repo_dir)


@pytest.fixture
def file_store(context) -> FileHistoryStore:
    return FileHistoryStore(context.log_path)


def make_hop(
    events: list[tuple[int, str]] | None = None,
    provider: FakeProvider | None = None,
    *,
    context: RepositoryContext | None = None,
    store=None,
    now: float = NOW,
    config: HopConfig | None = None,
) -> Hop:
    """Build a Hop over an in-memory store with a frozen clock."""
    if store is None:
        store = MemoryHistoryStore(SwitchEvent(ts, name) for ts, name in (events or []))
    if context is None:
        context = RepositoryContext.for_root("/repo", "/repo/.git")
    return Hop.from_components(
        context=context,
        store=store,
        provider=provider or FakeProvider(),
        config=config,
        clock=lambda: now,
    )
