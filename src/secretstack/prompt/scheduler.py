"""Decides when to suggest a secret scan after a commit, and records answers.

The prompt mode is a user setting (``always``, ``30days`` or ``disabled``)
and the time of the last prompt is private state. Both are read again for
every decision; a configuration change and a commit event may arrive in
either order, and a fresh read makes the order irrelevant.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from secretstack.config.store import ConfigStore
from secretstack.constants.config import LAST_PROMPT_TIME_KEY, PROMPT_MODE_KEY
from secretstack.constants.prompt import (
    CHOICE_DISABLE,
    CHOICE_NO,
    CHOICE_REMIND,
    CHOICE_YES,
    DEFAULT_PROMPT_MODE,
    DISABLE_ACK_MESSAGE,
    MODE_ALWAYS,
    MODE_DISABLED,
    MODE_THIRTY_DAYS,
    PROMPT_CHOICES,
    REMIND_ACK_MESSAGE,
    SCAN_PROMPT_MESSAGE,
    SCAN_STARTED_MESSAGE,
    THIRTY_DAYS_MS,
    VALID_PROMPT_MODES,
)
from secretstack.exceptions import SecretStackError
from secretstack.model import PromptState
from secretstack.prompt.surface import PromptSurface
from secretstack.scan_action import ScanAction
from secretstack.state import StateStore
from secretstack.utils import now_ms

logger = logging.getLogger(__name__)


def should_prompt(now: int, state: PromptState) -> bool:
    """Return whether the scan prompt may be shown at ``now`` (epoch ms).

    An unrecognized mode fails closed.
    """
    mode = state.prompt_mode
    if mode not in VALID_PROMPT_MODES:
        logger.error("Unexpected prompt setting: %s", mode)
        return False
    if mode == MODE_DISABLED:
        return False
    if mode == MODE_THIRTY_DAYS:
        return state.last_prompt_timestamp < now - THIRTY_DAYS_MS
    return mode == MODE_ALWAYS


@dataclass(frozen=True)
class WriteFailure:
    """A persistence write that did not complete."""

    key: str
    error: str


@dataclass(frozen=True)
class PersistOutcome:
    """Result of the best-effort writes made for one prompt answer.

    Inspect it for logging only; the decision it belongs to has already
    been acknowledged to the user.
    """

    choice: str | None
    written: tuple[str, ...] = ()
    failures: tuple[WriteFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failures


class PromptScheduler:
    """Commit-event handler that gates, presents and records the scan prompt."""

    def __init__(
        self,
        config: ConfigStore,
        state: StateStore,
        surface: PromptSurface,
        scan_action: ScanAction,
        *,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._config = config
        self._state = state
        self._surface = surface
        self._scan_action = scan_action
        self._clock = clock

    def read_state(self) -> PromptState | None:
        """Read the prompt mode and last prompt time, or ``None`` if unreadable."""
        try:
            mode = self._config.get(PROMPT_MODE_KEY, DEFAULT_PROMPT_MODE)
            last_prompt = self._state.last_prompt_timestamp()
        except SecretStackError as exc:
            logger.error("Cannot read prompt settings: %s", exc)
            return None
        return PromptState(last_prompt_timestamp=last_prompt, prompt_mode=str(mode))

    def should_prompt(self, now: int | None = None) -> bool:
        state = self.read_state()
        if state is None:
            return False
        return should_prompt(self._clock() if now is None else now, state)

    def run_prompt(self, now: int | None = None, *, root: Path | None = None) -> str | None:
        """Handle one commit event in ``root``; return the user's selection, if any."""
        if not self.should_prompt(now):
            return None
        selection = self._surface.choose(SCAN_PROMPT_MESSAGE, PROMPT_CHOICES)
        outcome = self.apply_response(selection, now, root=root)
        if not outcome.ok:
            logger.warning(
                "Prompt answer %r was only partially saved: %s",
                selection,
                ", ".join(failure.key for failure in outcome.failures),
            )
        return selection

    def apply_response(self, choice: str | None, now: int | None = None, *, root: Path | None = None) -> PersistOutcome:
        """Record the user's answer to the scan prompt.

        ``root`` is the workspace root whose commit raised the prompt; an
        accepted scan runs there.
        """
        timestamp = self._clock() if now is None else now

        if choice is None or choice == CHOICE_NO:
            return PersistOutcome(choice=choice)

        if choice == CHOICE_YES:
            self._start_scan(root)
            self._surface.inform(SCAN_STARTED_MESSAGE)
            return self._persist(choice, timestamp=timestamp)

        if choice == CHOICE_REMIND:
            self._surface.inform(REMIND_ACK_MESSAGE)
            return self._persist(choice, timestamp=timestamp, mode=MODE_THIRTY_DAYS)

        if choice == CHOICE_DISABLE:
            self._surface.inform(DISABLE_ACK_MESSAGE)
            return self._persist(choice, mode=MODE_DISABLED)

        logger.warning("Ignoring unrecognized prompt answer: %r", choice)
        return PersistOutcome(choice=choice)

    def _start_scan(self, root: Path | None) -> None:
        try:
            self._scan_action(root)
        except Exception:
            logger.exception("Scan action failed")

    def _persist(self, choice: str, *, timestamp: int | None = None, mode: str | None = None) -> PersistOutcome:
        written: list[str] = []
        failures: list[WriteFailure] = []
        if timestamp is not None:
            self._record(
                LAST_PROMPT_TIME_KEY,
                lambda: self._state.set_last_prompt_timestamp(timestamp),
                written,
                failures,
            )
        if mode is not None:
            self._record(PROMPT_MODE_KEY, lambda: self._config.update(PROMPT_MODE_KEY, mode), written, failures)
        return PersistOutcome(choice=choice, written=tuple(written), failures=tuple(failures))

    @staticmethod
    def _record(
        key: str,
        write: Callable[[], object],
        written: list[str],
        failures: list[WriteFailure],
    ) -> None:
        try:
            write()
        except SecretStackError as exc:
            logger.error("Failed to persist %s: %s", key, exc)
            failures.append(WriteFailure(key=key, error=str(exc)))
            return
        written.append(key)
