"""Rich formatting helpers for the Hop CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hop.operations.switch import SwitchStatus

if TYPE_CHECKING:
    from hop.models.branch import RankedBranch
    from hop.operations.switch import SwitchOutcome


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def _stars(branch: RankedBranch) -> str:
    return "*" * branch.stars


def format_ranked(branches: list[RankedBranch], console: Console, *, empty: str) -> None:
    """Display ranked branches as a table, current branch flagged."""
    if not branches:
        console.print(f"[dim]{escape(empty)}[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("", width=1)
    table.add_column("Branch")
    table.add_column("Score", justify="right", style="cyan")
    table.add_column("Stars", style="yellow")

    for branch in branches:
        name = escape(branch.name)
        table.add_row(
            "[green]*[/green]" if branch.is_current else "",
            f"[green]{name}[/green]" if branch.is_current else name,
            f"{branch.score:.2f}",
            _stars(branch),
        )

    console.print(table)


def format_numbered(branches: list[RankedBranch], console: Console) -> None:
    """Display a 1-based numbered list for interactive selection."""
    width = len(str(len(branches)))
    for i, branch in enumerate(branches, start=1):
        marker = " [green](current)[/green]" if branch.is_current else ""
        console.print(
            f"  [bold]{i:>{width}}[/bold]) {escape(branch.name)} "
            f"[yellow]{_stars(branch)}[/yellow]{marker}"
        )


def format_outcome(outcome: SwitchOutcome, console: Console, *, dry_run: bool = False) -> None:
    """Report a switch outcome.

    In dry-run mode only the selected branch name is printed, so the output
    can be captured by scripts.
    """
    if dry_run or outcome.status is SwitchStatus.DRY_RUN:
        console.print(outcome.branch, markup=False, highlight=False, soft_wrap=True)
        return

    branch = escape(outcome.branch or "")
    if outcome.multiple_matches:
        console.print(
            f"[yellow]{len(outcome.candidates)} branches match; "
            f"using the most used: {branch}[/yellow]"
        )
    if outcome.status is SwitchStatus.ALREADY_CURRENT:
        console.print(f"Already on branch [green]{branch}[/green]")
    elif outcome.status is SwitchStatus.SWITCHED:
        console.print(f"Switched to branch [green]{branch}[/green]")


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
