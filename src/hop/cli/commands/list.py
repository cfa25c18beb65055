"""hop list -- show ranked branches with usage scores."""

from __future__ import annotations

import click

from hop.cli.formatting import format_ranked


@click.command("list")
@click.argument("pattern", required=False)
@click.pass_context
def list_branches(ctx: click.Context, pattern: str | None) -> None:
    """List tracked branches, or branches matching PATTERN, by usage."""
    from hop.cli import _hop_session

    with _hop_session(ctx) as (hop, console):
        empty = f"No branches match '{pattern}'." if pattern else "No tracked branches yet."
        format_ranked(hop.ranked_branches(pattern), console, empty=empty)
