"""hop switch -- jump to the most used branch matching a pattern."""

from __future__ import annotations

import click

from hop.cli.formatting import format_outcome, format_ranked


@click.command()
@click.argument("pattern", required=False)
@click.option("-n", "--dry-run", is_flag=True, help="Print the branch that would be chosen, do not switch.")
@click.option("-l", "--list", "list_only", is_flag=True, help="List ranked matches instead of switching.")
@click.pass_context
def switch(ctx: click.Context, pattern: str | None, dry_run: bool, list_only: bool) -> None:
    """Switch to the branch PATTERN most likely means.

    PATTERN is matched case-insensitively anywhere in the branch name.
    When several branches match, the most used one wins.  Without PATTERN
    the most used tracked branch is chosen.
    """
    from hop.cli import _hop_session
    from hop.operations.switch import SwitchStatus

    with _hop_session(ctx) as (hop, console):
        outcome = hop.execute(pattern, dry_run=dry_run, list_only=list_only)
        if outcome.status is SwitchStatus.LISTED:
            format_ranked(
                hop.describe(outcome.candidates, outcome.scores), console, empty="No matches."
            )
        else:
            format_outcome(outcome, console, dry_run=dry_run)
