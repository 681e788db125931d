"""Locations of global settings and private state."""

from __future__ import annotations

import os
from pathlib import Path

from secretstack.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_HOME_DIRNAME,
    GLOBAL_CONFIG_FILENAME,
    HOME_ENV_VAR,
    STATE_FILENAME,
)


def secretstack_home() -> Path:
    """Return the user-level directory, honouring ``SECRETSTACK_HOME``."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_HOME_DIRNAME


def global_config_path() -> Path:
    return secretstack_home() / GLOBAL_CONFIG_FILENAME


def state_path() -> Path:
    return secretstack_home() / STATE_FILENAME


def workspace_config_path(workspace: Path) -> Path:
    return workspace / CONFIG_FILENAME
