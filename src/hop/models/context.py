"""Repository context for Hop.

A RepositoryContext is built once per invocation and handed to every
component that needs a path.  Nothing in Hop reads paths from globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from hop.exceptions import NotARepositoryError
from hop.models.config import HopConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepositoryContext:
    """Paths for one repository.

    Attributes:
        root_path: Top-level working tree directory.
        git_dir: The repository's git directory (``.git`` or the target of
            a ``.git`` file).
        log_path: Location of the switch history log.
    """

    root_path: Path
    git_dir: Path
    log_path: Path

    @property
    def hooks_dir(self) -> Path:
        return self.git_dir / "hooks"

    @classmethod
    def discover(
        cls,
        start: str | Path = ".",
        *,
        config: HopConfig | None = None,
    ) -> RepositoryContext:
        """Find the enclosing repository of *start*.

        Walks up from *start* until a directory containing ``.git`` is found.
        A ``.git`` file (worktrees, submodules) is followed via its
        ``gitdir:`` line.

        Raises:
            NotARepositoryError: If no ancestor holds a ``.git`` entry.
        """
        config = config or HopConfig()
        start_path = Path(start).resolve()

        for candidate in (start_path, *start_path.parents):
            dot_git = candidate / ".git"
            if dot_git.is_dir():
                git_dir = dot_git
            elif dot_git.is_file():
                git_dir = _read_gitdir_file(dot_git)
            else:
                continue
            return cls.for_root(candidate, git_dir, config=config)

        raise NotARepositoryError(str(start_path))

    @classmethod
    def for_root(
        cls,
        root_path: str | Path,
        git_dir: str | Path,
        *,
        config: HopConfig | None = None,
    ) -> RepositoryContext:
        """Build a context from known root and git-dir paths."""
        config = config or HopConfig()
        git_dir = Path(git_dir)
        if config.history_path:
            log_path = Path(config.history_path)
        else:
            log_path = git_dir / config.tracking_dir_name / config.history_filename
        logger.debug("Repository root %s, history log %s", root_path, log_path)
        return cls(root_path=Path(root_path), git_dir=git_dir, log_path=log_path)


def _read_gitdir_file(dot_git: Path) -> Path:
    """Resolve the ``gitdir: <path>`` pointer inside a ``.git`` file."""
    content = dot_git.read_text(encoding="utf-8").strip()
    prefix = "gitdir:"
    if not content.startswith(prefix):
        raise NotARepositoryError(str(dot_git.parent))
    target = Path(content[len(prefix):].strip())
    if not target.is_absolute():
        target = (dot_git.parent / target).resolve()
    return target
