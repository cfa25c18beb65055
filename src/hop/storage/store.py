"""Abstract history store interface for Hop.

Defines the HistoryStore ABC shared by the file-backed store used in
production and the in-memory store used by tests and embedders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from hop.models.event import SwitchEvent


def validate_branch_for_log(branch: str) -> None:
    """Reject names the one-record-per-line format cannot hold.

    Raises:
        ValueError: If *branch* is empty or contains whitespace.
    """
    if not branch:
        raise ValueError("branch name cannot be empty")
    if any(ch.isspace() for ch in branch):
        raise ValueError(f"branch name cannot contain whitespace: {branch!r}")


class HistoryStore(ABC):
    """Append-only log of switch events."""

    @abstractmethod
    def append(self, event: SwitchEvent) -> None:
        """Append one event to the end of the log.

        Raises:
            StoreIOError: If the log cannot be written.
            ValueError: If the branch name is not storable.
        """
        ...

    @abstractmethod
    def iterate(self) -> Iterator[SwitchEvent]:
        """Yield events in storage order.

        Each call starts a fresh read.  A missing or empty store yields
        nothing.
        """
        ...

    def distinct_branch_names(self) -> list[str]:
        """Branch names that appear in the log, in first-appearance order."""
        return list(dict.fromkeys(event.branch for event in self.iterate()))


class MemoryHistoryStore(HistoryStore):
    """HistoryStore kept in a Python list."""

    def __init__(self, events: Iterable[SwitchEvent] = ()) -> None:
        self._events: list[SwitchEvent] = []
        for event in events:
            self.append(event)

    def append(self, event: SwitchEvent) -> None:
        validate_branch_for_log(event.branch)
        self._events.append(event)

    def iterate(self) -> Iterator[SwitchEvent]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
