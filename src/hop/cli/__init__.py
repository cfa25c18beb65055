"""Hop CLI -- terminal interface for the branch switcher.

This module is never imported from hop/__init__.py.  It is loaded via the
``hop`` entry point defined in pyproject.toml or ``python -m hop``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler

from hop._version import __version__
from hop.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hop.hop import Hop


@click.group()
@click.option(
    "-C",
    "--repo",
    default=".",
    type=click.Path(file_okay=False),
    help="Run as if started in this directory.",
)
@click.option(
    "--history",
    default=None,
    envvar="HOP_HISTORY",
    help="Path to the switch history log (default: .git/hop/history).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="hop")
@click.pass_context
def cli(ctx: click.Context, repo: str, history: str | None, verbose: bool) -> None:
    """Hop: switch git branches by partial name, ranked by how you use them."""
    ctx.ensure_object(dict)
    ctx.obj["repo"] = repo
    ctx.obj["history"] = history
    _configure_logging(verbose)


def _configure_logging(verbose: bool) -> None:
    """Route the ``hop`` logger to stderr through rich."""
    hop_logger = logging.getLogger("hop")
    for handler in list(hop_logger.handlers):
        hop_logger.removeHandler(handler)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    hop_logger.addHandler(handler)
    hop_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _get_hop(ctx: click.Context) -> Hop:
    """Open a Hop instance from Click context."""
    from hop.hop import Hop
    from hop.models.config import HopConfig

    config = HopConfig(history_path=ctx.obj["history"])
    return Hop.open(ctx.obj["repo"], config=config)


@contextmanager
def _hop_session(ctx: click.Context) -> Iterator[tuple[Hop, Console]]:
    """Open a Hop, yield (hop, console) and turn exceptions into CLI errors.

    Any exception escaping the ``with`` block prints one error line and
    exits with status 1.
    """
    console = get_console()
    try:
        yield _get_hop(ctx), console
    except SystemExit:
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from hop.cli.commands.switch import switch  # noqa: E402
from hop.cli.commands.list import list_branches  # noqa: E402
from hop.cli.commands.pick import pick  # noqa: E402
from hop.cli.commands.record import record  # noqa: E402
from hop.cli.commands.hook import install_hook, uninstall_hook  # noqa: E402

cli.add_command(switch)
cli.add_command(list_branches)
cli.add_command(pick)
cli.add_command(record)
cli.add_command(install_hook)
cli.add_command(uninstall_hook)
