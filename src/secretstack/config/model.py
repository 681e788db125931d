"""Config data model for Secretstack."""

from __future__ import annotations

from dataclasses import dataclass

from secretstack.constants.config import DEFAULT_ADD_TO_GITIGNORE, DEFAULT_IGNORE_FOLDER
from secretstack.constants.prompt import DEFAULT_PROMPT_MODE, MODE_DISABLED, MODE_THIRTY_DAYS


@dataclass(frozen=True)
class SecretStackConfig:
    """Resolved user settings."""

    prompt_to_scan_before_push: str = DEFAULT_PROMPT_MODE
    add_to_gitignore: bool = DEFAULT_ADD_TO_GITIGNORE
    ignore_folder: str = DEFAULT_IGNORE_FOLDER

    @property
    def prompt_disabled(self) -> bool:
        return self.prompt_to_scan_before_push == MODE_DISABLED

    @property
    def prompt_throttled(self) -> bool:
        """Whether prompts are gated by the 30-day cooldown."""
        return self.prompt_to_scan_before_push == MODE_THIRTY_DAYS
