"""Strict config loading for CLI commands."""

from __future__ import annotations

from secretstack.config.model import SecretStackConfig
from secretstack.config.store import ConfigStore
from secretstack.constants.config import (
    ADD_TO_GITIGNORE_KEY,
    DEFAULT_ADD_TO_GITIGNORE,
    DEFAULT_IGNORE_FOLDER,
    IGNORE_FOLDER_KEY,
    PROMPT_MODE_KEY,
)
from secretstack.constants.prompt import DEFAULT_PROMPT_MODE, VALID_PROMPT_MODES
from secretstack.exceptions import ConfigError


def load_config(store: ConfigStore) -> SecretStackConfig:
    """Read and type-check every recognized setting from ``store``."""
    prompt_mode = store.get(PROMPT_MODE_KEY, DEFAULT_PROMPT_MODE)
    if not isinstance(prompt_mode, str) or prompt_mode not in VALID_PROMPT_MODES:
        raise ConfigError(f"{PROMPT_MODE_KEY} must be one of {sorted(VALID_PROMPT_MODES)}, got {prompt_mode!r}")

    add_to_gitignore = store.get(ADD_TO_GITIGNORE_KEY, DEFAULT_ADD_TO_GITIGNORE)
    if not isinstance(add_to_gitignore, bool):
        raise ConfigError(f"{ADD_TO_GITIGNORE_KEY} must be a boolean")

    return SecretStackConfig(
        prompt_to_scan_before_push=prompt_mode,
        add_to_gitignore=add_to_gitignore,
        ignore_folder=read_ignore_folder(store),
    )


def read_ignore_folder(store: ConfigStore) -> str:
    """Return the configured report folder name to keep out of version control."""
    folder = store.get(IGNORE_FOLDER_KEY, DEFAULT_IGNORE_FOLDER)
    if not isinstance(folder, str) or not folder.strip():
        raise ConfigError(f"{IGNORE_FOLDER_KEY} must be a non-empty string")
    return folder.strip()


def read_add_to_gitignore(store: ConfigStore) -> bool:
    """Return the ``addToGitIgnore`` toggle, treating non-boolean values as an error."""
    value = store.get(ADD_TO_GITIGNORE_KEY, DEFAULT_ADD_TO_GITIGNORE)
    if not isinstance(value, bool):
        raise ConfigError(f"{ADD_TO_GITIGNORE_KEY} must be a boolean")
    return value
