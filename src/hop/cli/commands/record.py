"""hop record -- append a branch switch to the history log."""

from __future__ import annotations

import click


@click.command()
@click.argument("branch")
@click.option("--timestamp", type=int, default=None, help="Unix time of the switch (default: now).")
@click.pass_context
def record(ctx: click.Context, branch: str, timestamp: int | None) -> None:
    """Record a switch to BRANCH.  Run by the post-checkout hook.

    Prints nothing on success; errors go through the usual error line.
    """
    from hop.cli import _hop_session

    with _hop_session(ctx) as (hop, _console):
        hop.record_switch(branch, timestamp)
