"""post-checkout hook management.

The installed hook records every branch checkout by running
``hop record <branch>``.  A pre-existing hook is moved aside to
``post-checkout.bak`` and still runs first.  The hook never fails a
checkout: recording errors are reported on stderr and the hook still exits 0.
"""

from __future__ import annotations

import enum
import logging
import os
import shlex
import sys
from typing import TYPE_CHECKING

from hop.exceptions import HookError

if TYPE_CHECKING:
    from pathlib import Path

    from hop.models.context import RepositoryContext

logger = logging.getLogger(__name__)

HOOK_NAME = "post-checkout"
BACKUP_SUFFIX = ".bak"
HOOK_MARKER = "# managed by hop: records branch switches"


class HookAction(str, enum.Enum):
    INSTALLED = "installed"
    UPDATED = "updated"
    REMOVED = "removed"
    RESTORED = "restored"


def default_record_command() -> str:
    """Command line the hook uses to reach ``hop record``."""
    return f"{shlex.quote(sys.executable)} -m hop record"


def render_hook(record_command: str) -> str:
    """Shell script body for the post-checkout hook."""
    lines = [
        "#!/bin/sh",
        HOOK_MARKER,
        "# args: <previous HEAD> <new HEAD> <1 if branch checkout>",
        f'backup="$(dirname "$0")/{HOOK_NAME}{BACKUP_SUFFIX}"',
        'if [ -x "$backup" ]; then',
        '    "$backup" "$@" || exit $?',
        "fi",
        'if [ "$3" = "1" ]; then',
        '    branch="$(git rev-parse --abbrev-ref HEAD 2>/dev/null)"',
        '    if [ -n "$branch" ] && [ "$branch" != "HEAD" ]; then',
        f'        {record_command} "$branch" 1>&2 '
        '|| echo "hop: failed to record switch to $branch" >&2',
        "    fi",
        "fi",
        "exit 0",
    ]
    return "\n".join(lines) + "\n"


def is_hop_hook(path: Path) -> bool:
    try:
        return HOOK_MARKER in path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return False


def install_hook(
    context: RepositoryContext,
    *,
    record_command: str | None = None,
    force: bool = False,
) -> HookAction:
    """Install (or refresh) the recording hook.

    Raises:
        HookError: If a foreign hook exists and a backup is already taken,
            unless *force* is set (the old backup is then overwritten).
    """
    hooks_dir = context.hooks_dir
    hook_path = hooks_dir / HOOK_NAME
    backup_path = hooks_dir / f"{HOOK_NAME}{BACKUP_SUFFIX}"
    action = HookAction.INSTALLED

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        if hook_path.exists():
            if is_hop_hook(hook_path):
                action = HookAction.UPDATED
            else:
                if backup_path.exists() and not force:
                    raise HookError(
                        f"{hook_path} exists and {backup_path.name} is already taken. "
                        "Use --force to replace the backup."
                    )
                os.replace(hook_path, backup_path)
                logger.info("Backed up existing hook to %s", backup_path)

        hook_path.write_text(render_hook(record_command or default_record_command()))
        os.chmod(hook_path, 0o755)
    except OSError as exc:
        raise HookError(f"Cannot install hook in {hooks_dir}: {exc}") from exc

    return action


def uninstall_hook(context: RepositoryContext) -> HookAction:
    """Remove the recording hook, restoring any backed-up hook.

    Raises:
        HookError: If no hook is installed or the hook was not written by hop.
    """
    hook_path = context.hooks_dir / HOOK_NAME
    backup_path = context.hooks_dir / f"{HOOK_NAME}{BACKUP_SUFFIX}"

    if not hook_path.exists():
        raise HookError(f"No {HOOK_NAME} hook installed")
    if not is_hop_hook(hook_path):
        raise HookError(f"{hook_path} was not installed by hop; leaving it alone")

    try:
        if backup_path.exists():
            os.replace(backup_path, hook_path)
            return HookAction.RESTORED
        hook_path.unlink()
    except OSError as exc:
        raise HookError(f"Cannot remove hook {hook_path}: {exc}") from exc
    return HookAction.REMOVED
