"""VersionControlProvider protocol.

Everything Hop needs from the version-control system goes through these
four methods.  GitProvider shells out to git; tests use an in-memory fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class VersionControlProvider(Protocol):
    """Branch queries and checkout."""

    def list_branches(self) -> list[str]:
        """Local branch names, excluding the symbolic HEAD pointer."""
        ...

    def current_branch(self) -> str:
        """Name of the checked-out branch (``HEAD`` when detached)."""
        ...

    def branch_exists(self, name: str) -> bool:
        """Whether a local branch called *name* exists."""
        ...

    def checkout(self, name: str) -> bool:
        """Switch to *name*.  Returns False on failure."""
        ...
