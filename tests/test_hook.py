"""Tests for post-checkout hook installation."""

from __future__ import annotations

import os
import stat

import pytest

from hop import HookError
from hop.hook import (
    HOOK_MARKER,
    HookAction,
    default_record_command,
    install_hook,
    is_hop_hook,
    render_hook,
    uninstall_hook,
)

FOREIGN_HOOK = "#!/bin/sh\necho 'my own hook'\n"


@pytest.fixture
def hook_path(context):
    return context.hooks_dir / "post-checkout"


@pytest.fixture
def backup_path(context):
    return context.hooks_dir / "post-checkout.bak"


class TestRenderHook:
    def test_script_shape(self):
        script = render_hook("hop record")
        assert script.startswith("#!/bin/sh\n")
        assert HOOK_MARKER in script
        assert 'hop record "$branch"' in script
        assert '[ "$3" = "1" ]' in script
        assert script.rstrip().endswith("exit 0")

    def test_record_errors_reach_stderr(self):
        script = render_hook("hop record")
        assert 'hop record "$branch" 1>&2' in script
        assert "/dev/null 2>&1" not in script.split("rev-parse")[1]
        assert "failed to record switch" in script

    def test_default_command_uses_module(self):
        assert default_record_command().endswith("-m hop record")


class TestInstallHook:
    def test_fresh_install(self, context, hook_path):
        assert install_hook(context, record_command="hop record") is HookAction.INSTALLED
        assert is_hop_hook(hook_path)
        assert hook_path.stat().st_mode & stat.S_IXUSR

    def test_reinstall_updates(self, context, hook_path, backup_path):
        install_hook(context, record_command="old record")
        assert install_hook(context, record_command="new record") is HookAction.UPDATED
        assert "new record" in hook_path.read_text()
        assert not backup_path.exists()

    def test_foreign_hook_backed_up(self, context, hook_path, backup_path):
        context.hooks_dir.mkdir(parents=True)
        hook_path.write_text(FOREIGN_HOOK)
        assert install_hook(context) is HookAction.INSTALLED
        assert backup_path.read_text() == FOREIGN_HOOK
        assert is_hop_hook(hook_path)

    def test_existing_backup_blocks_install(self, context, hook_path, backup_path):
        context.hooks_dir.mkdir(parents=True)
        hook_path.write_text(FOREIGN_HOOK)
        backup_path.write_text("older backup")
        with pytest.raises(HookError, match="--force"):
            install_hook(context)
        assert hook_path.read_text() == FOREIGN_HOOK

    def test_force_replaces_backup(self, context, hook_path, backup_path):
        context.hooks_dir.mkdir(parents=True)
        hook_path.write_text(FOREIGN_HOOK)
        backup_path.write_text("older backup")
        install_hook(context, force=True)
        assert backup_path.read_text() == FOREIGN_HOOK


class TestUninstallHook:
    def test_remove(self, context, hook_path):
        install_hook(context)
        assert uninstall_hook(context) is HookAction.REMOVED
        assert not hook_path.exists()

    def test_restore_backup(self, context, hook_path, backup_path):
        context.hooks_dir.mkdir(parents=True)
        hook_path.write_text(FOREIGN_HOOK)
        install_hook(context)
        assert uninstall_hook(context) is HookAction.RESTORED
        assert hook_path.read_text() == FOREIGN_HOOK
        assert not backup_path.exists()

    def test_nothing_installed(self, context):
        with pytest.raises(HookError, match="No post-checkout hook"):
            uninstall_hook(context)

    def test_foreign_hook_left_alone(self, context, hook_path):
        context.hooks_dir.mkdir(parents=True)
        hook_path.write_text(FOREIGN_HOOK)
        with pytest.raises(HookError, match="not installed by hop"):
            uninstall_hook(context)
        assert hook_path.read_text() == FOREIGN_HOOK
        assert os.path.exists(hook_path)
