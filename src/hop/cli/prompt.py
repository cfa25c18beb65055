"""Interactive branch selection.

Shows a numbered list and reads a single 1-based index.  Bad input raises
InvalidSelectionError; there is no retry loop, the user re-runs the command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hop.cli.formatting import format_numbered
from hop.operations.select import parse_selection

if TYPE_CHECKING:
    from rich.console import Console

    from hop.models.branch import RankedBranch


def prompt_selection(
    branches: list[RankedBranch],
    console: Console,
    *,
    reply: str | None = None,
) -> str:
    """Ask the user to pick one of *branches* and return its name.

    *reply* bypasses the terminal read (scripts, tests).
    """
    format_numbered(branches, console)
    if reply is None:
        try:
            reply = console.input(f"Select a branch [1-{len(branches)}]: ")
        except EOFError:
            reply = ""
    index = parse_selection(reply, len(branches))
    return branches[index].name
