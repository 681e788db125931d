"""Shared pytest fixtures for workspaces, settings and state."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from secretstack.config import ConfigStore
from secretstack.state import StateStore


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep global settings and state out of the real home directory."""
    home = tmp_path_factory.mktemp("secretstack-home")
    monkeypatch.setenv("SECRETSTACK_HOME", str(home))
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def config_store(workspace: Path, tmp_path: Path) -> ConfigStore:
    return ConfigStore(workspace=workspace, global_path=tmp_path / "global" / "config.yaml")


@pytest.fixture
def state_store(tmp_path: Path) -> StateStore:
    return StateStore(tmp_path / "state" / "state.json")


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., Path]:
    """Create a directory, optionally with a ``.git`` dir and ``.gitignore`` content."""

    def _make(name: str, *, git: bool = True, gitignore: str | None = None) -> Path:
        root = tmp_path / "repos" / name
        root.mkdir(parents=True)
        if git:
            (root / ".git" / "logs").mkdir(parents=True)
        if gitignore is not None:
            (root / ".gitignore").write_text(gitignore, encoding="utf-8")
        return root

    return _make
