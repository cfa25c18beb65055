"""hop install-hook / uninstall-hook -- manage the post-checkout hook."""

from __future__ import annotations

import click


@click.command("install-hook")
@click.option("--force", is_flag=True, help="Overwrite an existing post-checkout.bak backup.")
@click.pass_context
def install_hook(ctx: click.Context, force: bool) -> None:
    """Install a post-checkout hook that records branch switches.

    An existing hook is kept as post-checkout.bak and still runs.
    """
    from hop.cli import _hop_session

    with _hop_session(ctx) as (hop, console):
        action = hop.install_hook(force=force)
        console.print(f"Hook {action.value}: [cyan]{hop.context.hooks_dir / 'post-checkout'}[/cyan]")


@click.command("uninstall-hook")
@click.pass_context
def uninstall_hook(ctx: click.Context) -> None:
    """Remove the hop post-checkout hook, restoring any backup."""
    from hop.cli import _hop_session

    with _hop_session(ctx) as (hop, console):
        action = hop.uninstall_hook()
        console.print(f"Hook {action.value}: [cyan]{hop.context.hooks_dir / 'post-checkout'}[/cyan]")
