"""GitProvider -- VersionControlProvider backed by the git executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from hop.exceptions import VersionControlError

logger = logging.getLogger(__name__)


class GitProvider:
    """Run git commands inside one working tree."""

    def __init__(self, root_path: str | Path, *, git_executable: str = "git") -> None:
        self._root = Path(root_path)
        self._git = git_executable
        self.last_error: str = ""

    def _run_git(self, args: list[str]) -> tuple[int, str, str]:
        """Run a git command and return (returncode, stdout, stderr)."""
        cmd = [self._git, *args]
        logger.debug("Running %s in %s", " ".join(cmd), self._root)
        try:
            result = subprocess.run(
                cmd,
                cwd=self._root,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            raise VersionControlError(
                f"Git executable not found: {self._git}"
            ) from None
        return result.returncode, result.stdout.strip(), result.stderr.strip()

    def list_branches(self) -> list[str]:
        rc, out, err = self._run_git(
            ["for-each-ref", "--format=%(refname:short)", "refs/heads/"]
        )
        if rc != 0:
            raise VersionControlError(f"Failed to list branches: {err}")
        names = [line.strip() for line in out.splitlines()]
        return [name for name in names if name and name != "HEAD"]

    def current_branch(self) -> str:
        rc, out, err = self._run_git(["rev-parse", "--abbrev-ref", "HEAD"])
        if rc != 0:
            # Unborn branch: HEAD points at a ref that has no commit yet.
            rc, out, err = self._run_git(["symbolic-ref", "--short", "HEAD"])
            if rc != 0:
                raise VersionControlError(f"Failed to read current branch: {err}")
        return out

    def branch_exists(self, name: str) -> bool:
        rc, _, _ = self._run_git(["show-ref", "--verify", "--quiet", f"refs/heads/{name}"])
        return rc == 0

    def checkout(self, name: str) -> bool:
        rc, _, err = self._run_git(["checkout", name, "--"])
        self.last_error = err if rc != 0 else ""
        if rc != 0:
            logger.warning("git checkout %s failed: %s", name, err)
        return rc == 0

    def __repr__(self) -> str:
        return f"GitProvider({str(self._root)!r})"
