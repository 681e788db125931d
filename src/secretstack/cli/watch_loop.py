"""Host loop for ``secretstack watch``: commit prompts and settings listeners."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from secretstack.config.loader import read_add_to_gitignore
from secretstack.config.store import ConfigStore
from secretstack.exceptions import SecretStackError
from secretstack.ignore_file import ensure_ignored
from secretstack.prompt import PromptScheduler, PromptSurface
from secretstack.watch import CommitWatchTrigger, FileChangeWatch, WatchHandle

logger = logging.getLogger(__name__)


class WatchLoop:
    """Polls commit logs and settings files on a fixed interval.

    A commit in any watched root runs the scan prompt. A change to the
    ``addToGitIgnore`` setting reruns the ignore-file offer, as does startup.
    """

    def __init__(
        self,
        roots: Sequence[Path],
        config: ConfigStore,
        scheduler: PromptScheduler,
        surface: PromptSurface,
        *,
        trigger: CommitWatchTrigger | None = None,
    ) -> None:
        self._roots = tuple(roots)
        self._config = config
        self._surface = surface
        if trigger is None:
            trigger = CommitWatchTrigger(lambda root: scheduler.run_prompt(root=root))
        self._trigger = trigger
        self._config_watches: list[WatchHandle] = []
        self._add_to_gitignore: bool | None = None

    @property
    def trigger(self) -> CommitWatchTrigger:
        return self._trigger

    def start(self) -> dict[str, str]:
        """Register every watch and run the initial ignore-file check."""
        failures = self._trigger.watch_all(self._roots)
        for path in self._config.paths():
            try:
                self._config_watches.append(FileChangeWatch(path))
            except OSError as exc:
                logger.warning("Not watching settings file %s: %s", path, exc)
        self._add_to_gitignore = self._read_add_to_gitignore()
        self._check_ignore_file()
        return failures

    def tick(self) -> list[str]:
        """Poll once; return the roots whose commit log changed."""
        if self._poll_config_watches():
            self._on_config_change()
        return self._trigger.poll()

    def run(
        self,
        *,
        interval: float,
        iterations: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        count = 0
        try:
            while iterations is None or count < iterations:
                self.tick()
                count += 1
                if iterations is None or count < iterations:
                    sleep(interval)
        finally:
            self.stop()

    def stop(self) -> None:
        self._trigger.dispose()
        for handle in self._config_watches:
            handle.dispose()
        self._config_watches.clear()

    def _poll_config_watches(self) -> bool:
        changed = False
        for handle in list(self._config_watches):
            try:
                changed = handle.poll() or changed
            except OSError as exc:
                logger.warning("Settings watcher for %s failed to poll: %s", handle.path, exc)
        return changed

    def _on_config_change(self) -> None:
        current = self._read_add_to_gitignore()
        if current == self._add_to_gitignore:
            return
        logger.debug("addToGitIgnore changed: %s -> %s", self._add_to_gitignore, current)
        self._add_to_gitignore = current
        self._check_ignore_file()

    def _check_ignore_file(self) -> None:
        if self._add_to_gitignore:
            ensure_ignored(self._roots, self._config, self._surface)

    def _read_add_to_gitignore(self) -> bool | None:
        try:
            return read_add_to_gitignore(self._config)
        except SecretStackError as exc:
            logger.error("Cannot read ignore-file settings: %s", exc)
            return None
