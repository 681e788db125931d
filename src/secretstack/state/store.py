"""Private, non user-facing state persisted as a JSON document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from secretstack.config.paths import state_path
from secretstack.constants.config import LAST_PROMPT_TIME_KEY, STATE_TEMP_PREFIX, STATE_TEMP_SUFFIX
from secretstack.exceptions import StateError
from secretstack.io import load_json_file, write_json_atomic

logger = logging.getLogger(__name__)


class StateStore:
    """Key-value state file read fresh on every access."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path if path is not None else state_path()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def update(self, key: str, value: Any) -> None:
        values = self._read()
        values[key] = value
        try:
            write_json_atomic(
                path=self._path,
                payload=values,
                temp_prefix=STATE_TEMP_PREFIX,
                temp_suffix=STATE_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise StateError(f"Cannot write state file {self._path}: {exc}") from exc

    def last_prompt_timestamp(self) -> int:
        """Return the last prompt time in epoch milliseconds, 0 when never prompted."""
        value = self.get(LAST_PROMPT_TIME_KEY, 0)
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("Ignoring non-integer %s in %s: %r", LAST_PROMPT_TIME_KEY, self._path, value)
            return 0
        return value

    def set_last_prompt_timestamp(self, timestamp: int) -> None:
        self.update(LAST_PROMPT_TIME_KEY, int(timestamp))

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            raw = load_json_file(self._path)
        except OSError as exc:
            raise StateError(f"Cannot read state file {self._path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise StateError(f"Corrupt state file {self._path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise StateError(f"State file {self._path} must hold a JSON object")
        return raw
