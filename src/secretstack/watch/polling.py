"""Polling file-change watch used for commit logs and settings files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, TypeAlias

from secretstack.exceptions import WatchError

logger = logging.getLogger(__name__)

FileSignature: TypeAlias = tuple[int, int] | None


class WatchHandle(Protocol):
    """A subscription that reports whether its resource changed since the last poll."""

    @property
    def path(self) -> Path: ...

    def poll(self) -> bool: ...

    def dispose(self) -> None: ...


class FileChangeWatch:
    """Detect changes to one file by comparing ``(mtime_ns, size)`` between polls.

    The file need not exist yet: its appearance counts as a change, its
    removal does not.
    """

    def __init__(self, path: Path, *, anchor: Path | None = None) -> None:
        base = anchor if anchor is not None else path.parent
        if not base.is_dir():
            raise WatchError(f"Cannot watch {path}: {base} is not a directory")
        self._path = path
        self._signature = _signature(path)
        self._disposed = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def disposed(self) -> bool:
        return self._disposed

    def poll(self) -> bool:
        if self._disposed:
            return False
        current = _signature(self._path)
        previous, self._signature = self._signature, current
        if current is None:
            return False
        return current != previous

    def dispose(self) -> None:
        self._disposed = True


def _signature(path: Path) -> FileSignature:
    try:
        stat = path.stat()
    except FileNotFoundError:
        return None
    return (stat.st_mtime_ns, stat.st_size)
