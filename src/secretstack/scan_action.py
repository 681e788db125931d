"""Scan command collaborators invoked when the user accepts a scan prompt."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ScanAction(Protocol):
    """Fire-and-forget scan trigger for the root whose commit raised the prompt."""

    def __call__(self, root: Path | None = None) -> None: ...


class LoggingScanAction:
    """Used when no scan command is configured: records the request only."""

    def __call__(self, root: Path | None = None) -> None:
        logger.info("Secret scan requested for %s; no scan command is configured", root or "workspace")


class CommandScanAction:
    """Launch an external scan command without waiting for it to finish.

    The command runs in the root that raised the prompt, falling back to
    ``cwd``. Started processes are kept and reaped on later calls or by
    :meth:`reap`, so a long-running watch does not accumulate zombies.
    """

    def __init__(self, argv: Sequence[str], *, cwd: Path | None = None) -> None:
        if not argv:
            raise ValueError("scan command must not be empty")
        self._argv = tuple(argv)
        self._cwd = cwd
        self._running: list[subprocess.Popen[bytes]] = []

    @classmethod
    def from_string(cls, command: str, *, cwd: Path | None = None) -> CommandScanAction:
        return cls(shlex.split(command), cwd=cwd)

    @property
    def argv(self) -> tuple[str, ...]:
        return self._argv

    @property
    def running(self) -> int:
        """Number of started scans that had not exited at the last reap."""
        return len(self._running)

    def __call__(self, root: Path | None = None) -> None:
        self.reap()
        cwd = root if root is not None else self._cwd
        try:
            process = subprocess.Popen(self._argv, cwd=cwd)
        except OSError as exc:
            logger.error("Failed to start scan command %s in %s: %s", shlex.join(self._argv), cwd, exc)
            return
        self._running.append(process)
        logger.info("Started scan command %s in %s (pid %d)", shlex.join(self._argv), cwd, process.pid)

    def reap(self) -> int:
        """Collect exit statuses of finished scans; return how many finished."""
        finished = [process for process in self._running if process.poll() is not None]
        for process in finished:
            logger.debug("Scan command pid %d exited with %d", process.pid, process.returncode)
        self._running = [process for process in self._running if process.returncode is None]
        return len(finished)
