"""File-backed history store.

One record per line: ``<unix-timestamp> <branch-name>``.  Names that are
not valid UTF-8 round-trip through surrogate escapes.  Appends are a single
``os.write`` on an ``O_APPEND`` descriptor so records written by concurrent
hook processes never interleave.  Reads take no lock and may or
may not observe an append racing with them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from hop.exceptions import StoreIOError
from hop.models.event import SwitchEvent
from hop.storage.store import HistoryStore, validate_branch_for_log

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class FileHistoryStore(HistoryStore):
    """HistoryStore persisted as an append-only text file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, event: SwitchEvent) -> None:
        validate_branch_for_log(event.branch)
        data = event.to_line().encode("utf-8", errors="surrogateescape")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self._path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
            try:
                written = os.write(fd, data)
            finally:
                os.close(fd)
        except OSError as exc:
            raise StoreIOError(str(self._path), exc.strerror or str(exc)) from exc
        if written != len(data):
            raise StoreIOError(
                str(self._path), f"short write ({written} of {len(data)} bytes)"
            )
        logger.debug("Recorded switch to %s at %d", event.branch, event.timestamp)

    def iterate(self) -> Iterator[SwitchEvent]:
        try:
            fh = open(self._path, encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            return
        except OSError as exc:
            logger.warning("Cannot read history log %s: %s", self._path, exc)
            return

        with fh:
            for lineno, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                try:
                    event = SwitchEvent.from_line(line)
                except ValueError as exc:
                    logger.warning(
                        "Skipping malformed line %d in %s: %s", lineno, self._path, exc
                    )
                    continue
                yield event

    def __repr__(self) -> str:
        return f"FileHistoryStore({str(self._path)!r})"
