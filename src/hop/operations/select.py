"""Ranking and selection policy for Hop.

Pure functions over candidate lists.  Nothing here prompts or prints; the
terminal side of interactive selection lives in hop.cli.prompt.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hop.exceptions import InvalidSelectionError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    ScoreFn = Callable[[str, float], float]

MAX_RESULTS = 20


class SelectionKind(str, enum.Enum):
    """How a selection was reached."""

    NONE = "none"
    SINGLE = "single"
    MULTIPLE = "multiple"  # top-ranked of several, auto-selected
    LIST = "list"  # display only, nothing selected


@dataclass(frozen=True)
class Selection:
    """Outcome of the selection policy.

    Attributes:
        kind: Which branch of the policy applied.
        branch: The chosen branch, or None for NONE and LIST.
        candidates: The ranked list the choice was made from.
    """

    kind: SelectionKind
    branch: str | None = None
    candidates: list[str] = field(default_factory=list)

    @property
    def multiple_matches(self) -> bool:
        return self.kind is SelectionKind.MULTIPLE


class RankedSelector:
    """Sort candidates by score and apply the selection policy."""

    def __init__(self, limit: int = MAX_RESULTS) -> None:
        self._limit = limit

    def rank(
        self,
        candidates: Sequence[str],
        score_fn: ScoreFn,
        now: float,
    ) -> list[str]:
        """Order *candidates* by score, highest first.

        Equal scores keep their relative input order.  At most ``limit``
        names are returned.
        """
        scored = [(name, score_fn(name, now)) for name in candidates]
        scored.sort(key=lambda item: item[1], reverse=True)
        return [name for name, _ in scored[: self._limit]]

    def select(self, ranked: Sequence[str], *, list_only: bool = False) -> Selection:
        """Apply the selection policy to an already ranked list."""
        ranked = list(ranked)
        if not ranked:
            return Selection(SelectionKind.NONE)
        if len(ranked) == 1:
            return Selection(SelectionKind.SINGLE, ranked[0], ranked)
        if list_only:
            return Selection(SelectionKind.LIST, None, ranked)
        return Selection(SelectionKind.MULTIPLE, ranked[0], ranked)


def parse_selection(reply: str, count: int) -> int:
    """Turn a 1-based reply into a 0-based index into a list of *count*.

    Raises:
        InvalidSelectionError: If *reply* is not a number in ``1..count``.
    """
    text = reply.strip()
    if not text.isdigit():
        raise InvalidSelectionError(reply, count)
    index = int(text)
    if not 1 <= index <= count:
        raise InvalidSelectionError(reply, count)
    return index - 1
