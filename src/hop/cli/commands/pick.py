"""hop pick -- choose a branch from a numbered list."""

from __future__ import annotations

import click

from hop.cli.formatting import format_outcome
from hop.cli.prompt import prompt_selection


@click.command()
@click.argument("pattern", required=False)
@click.option("-n", "--dry-run", is_flag=True, help="Print the chosen branch, do not switch.")
@click.pass_context
def pick(ctx: click.Context, pattern: str | None, dry_run: bool) -> None:
    """Pick a branch interactively from the ranked matches for PATTERN."""
    from hop.cli import _hop_session
    from hop.exceptions import NoMatchError

    with _hop_session(ctx) as (hop, console):
        branches = hop.ranked_branches(pattern)
        if not branches:
            raise NoMatchError(pattern)
        branch = prompt_selection(branches, console)
        format_outcome(hop.switch_to(branch, dry_run=dry_run), console, dry_run=dry_run)
