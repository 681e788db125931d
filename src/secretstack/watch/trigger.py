"""Commit-log watches keyed by workspace root.

Each root gets its own subscription on ``.git/logs/HEAD``; a change there is
taken as "a commit just happened". Setup, polling and teardown are
independent per root, so a broken root never disables the others.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TypeAlias

from secretstack.constants.git import COMMIT_LOG_PARTS
from secretstack.watch.polling import FileChangeWatch, WatchHandle

logger = logging.getLogger(__name__)

WatchFactory: TypeAlias = Callable[[Path], WatchHandle]


def commit_log_path(root: Path) -> Path:
    return root.joinpath(*COMMIT_LOG_PARTS)


def commit_log_watch(root: Path) -> WatchHandle:
    """Default factory: poll the root's commit log, anchored at the root itself."""
    return FileChangeWatch(commit_log_path(root), anchor=root)


def root_id(root: Path) -> str:
    return str(root.resolve())


class CommitWatchTrigger:
    """Registry of commit-log watches dispatching to ``on_commit``."""

    def __init__(
        self,
        on_commit: Callable[[Path], object],
        *,
        watch_factory: WatchFactory = commit_log_watch,
    ) -> None:
        self._on_commit = on_commit
        self._watch_factory = watch_factory
        self._roots: dict[str, Path] = {}
        self._handles: dict[str, WatchHandle] = {}

    @property
    def watched_roots(self) -> tuple[str, ...]:
        return tuple(sorted(self._handles))

    def watch(self, root: Path) -> bool:
        """Start (or restart) the watch for ``root``; return False on failure."""
        key = root_id(root)
        self.unwatch(root)
        try:
            handle = self._watch_factory(root)
        except OSError as exc:
            logger.error("Error initializing commit watcher for %s: %s", root.name or key, exc)
            return False
        self._roots[key] = root
        self._handles[key] = handle
        logger.debug("Watching commit log %s", handle.path)
        return True

    def watch_all(self, roots: Iterable[Path]) -> dict[str, str]:
        """Watch every root; return ``{root_id: reason}`` for the ones that failed."""
        failures: dict[str, str] = {}
        for root in roots:
            if not self.watch(root):
                failures[root_id(root)] = "watch setup failed"
        return failures

    def unwatch(self, root: Path) -> bool:
        key = root_id(root)
        handle = self._handles.pop(key, None)
        self._roots.pop(key, None)
        if handle is None:
            return False
        _dispose(key, handle)
        return True

    def dispose(self) -> None:
        for key, handle in list(self._handles.items()):
            _dispose(key, handle)
        self._handles.clear()
        self._roots.clear()

    def poll(self) -> list[str]:
        """Poll every watch and dispatch ``on_commit`` for roots whose log changed.

        Returns the ids of roots that fired. Failures are logged per root and
        never escape, so one root cannot stop the others or the host loop.
        """
        fired: list[str] = []
        for key, handle in list(self._handles.items()):
            try:
                changed = handle.poll()
            except OSError as exc:
                logger.error("Commit watcher for %s failed to poll: %s", key, exc)
                continue
            if not changed:
                continue
            fired.append(key)
            try:
                self._on_commit(self._roots[key])
            except Exception:
                logger.exception("Commit handler failed for %s", key)
        return fired


def _dispose(key: str, handle: WatchHandle) -> None:
    try:
        handle.dispose()
    except OSError as exc:
        logger.warning("Failed to dispose commit watcher for %s: %s", key, exc)
