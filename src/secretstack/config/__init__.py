"""Settings storage, loading and validation for Secretstack.

This package facade re-exports the public names so callers can use
``from secretstack.config import ...``.
"""

from __future__ import annotations

from secretstack.config.loader import load_config, read_add_to_gitignore, read_ignore_folder
from secretstack.config.model import SecretStackConfig
from secretstack.config.paths import global_config_path, secretstack_home, state_path, workspace_config_path
from secretstack.config.store import ConfigStore
from secretstack.config.validator import validate_config_file

__all__ = [
    "ConfigStore",
    "SecretStackConfig",
    "global_config_path",
    "load_config",
    "read_add_to_gitignore",
    "read_ignore_folder",
    "secretstack_home",
    "state_path",
    "validate_config_file",
    "workspace_config_path",
]
