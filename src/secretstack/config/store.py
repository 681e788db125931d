"""Scoped key-value settings backed by YAML files.

Settings live in two files: the workspace file (``secretstack.yaml`` at the
workspace root) and the user-level global file. Workspace values override
global ones. Nothing is cached: each ``get`` reads the files again, so edits
made outside this process are visible at the very next decision.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from secretstack.config.paths import global_config_path, workspace_config_path
from secretstack.constants.config import (
    CONFIG_TEMP_PREFIX,
    CONFIG_TEMP_SUFFIX,
    SCOPE_GLOBAL,
    SCOPE_WORKSPACE,
    VALID_SCOPES,
)
from secretstack.exceptions import ConfigError
from secretstack.io import write_text_atomic

logger = logging.getLogger(__name__)


class ConfigStore:
    """Workspace-or-global settings store with fresh reads."""

    def __init__(self, workspace: Path | None = None, global_path: Path | None = None) -> None:
        self._workspace = workspace.resolve() if workspace is not None else None
        self._global_path = global_path if global_path is not None else global_config_path()

    @property
    def workspace_path(self) -> Path | None:
        if self._workspace is None:
            return None
        return workspace_config_path(self._workspace)

    @property
    def global_path(self) -> Path:
        return self._global_path

    @property
    def has_workspace(self) -> bool:
        return self._workspace is not None

    def paths(self) -> tuple[Path, ...]:
        """Return every backing file, most specific first."""
        workspace_path = self.workspace_path
        if workspace_path is None:
            return (self._global_path,)
        return (workspace_path, self._global_path)

    def default_scope(self) -> str:
        """Workspace scope when a workspace is open, else global."""
        return SCOPE_WORKSPACE if self.has_workspace else SCOPE_GLOBAL

    def get(self, key: str, default: Any = None) -> Any:
        """Read ``key`` with workspace values taking precedence over global ones."""
        for path in self.paths():
            values = _read_mapping(path)
            if key in values:
                return values[key]
        return default

    def update(self, key: str, value: Any, scope: str | None = None) -> Path:
        """Persist ``key`` in the chosen scope and return the written file."""
        target_scope = scope if scope is not None else self.default_scope()
        if target_scope not in VALID_SCOPES:
            raise ConfigError(f"scope must be one of {sorted(VALID_SCOPES)}, got {target_scope!r}")
        if target_scope == SCOPE_WORKSPACE:
            path = self.workspace_path
            if path is None:
                raise ConfigError("Cannot write workspace settings: no workspace is open")
        else:
            path = self._global_path

        values = _read_mapping(path)
        values[key] = value
        try:
            write_text_atomic(
                path=path,
                content=yaml.safe_dump(values, sort_keys=True, default_flow_style=False),
                temp_prefix=CONFIG_TEMP_PREFIX,
                temp_suffix=CONFIG_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise ConfigError(f"Cannot write settings to {path}: {exc}") from exc
        logger.debug("Updated setting %s in %s scope (%s)", key, target_scope, path)
        return path


def _read_mapping(path: Path) -> dict[str, Any]:
    """Load a settings file as a mapping; a missing file is empty."""
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read settings file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw
