"""Tests for the scan command launcher."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from secretstack import scan_action
from secretstack.scan_action import CommandScanAction, LoggingScanAction


class _FakeProcess:
    started: list[_FakeProcess] = []

    def __init__(self, argv: tuple[str, ...], cwd: Path | None = None) -> None:
        self.argv = argv
        self.cwd = cwd
        self.pid = 4000 + len(self.started)
        self.returncode: int | None = None
        self.started.append(self)

    def poll(self) -> int | None:
        return self.returncode


@pytest.fixture
def fake_popen(monkeypatch: pytest.MonkeyPatch) -> list[_FakeProcess]:
    started: list[_FakeProcess] = []
    monkeypatch.setattr(_FakeProcess, "started", started)
    monkeypatch.setattr(scan_action.subprocess, "Popen", _FakeProcess)
    return started


def test_from_string_splits_shell_words() -> None:
    action = CommandScanAction.from_string("gitleaks detect --source '.'")

    assert action.argv == ("gitleaks", "detect", "--source", ".")


def test_empty_command_is_rejected() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        CommandScanAction([])


def test_scan_runs_in_committing_root(fake_popen: list[_FakeProcess], tmp_path: Path) -> None:
    action = CommandScanAction(["scan"], cwd=tmp_path / "alpha")

    action(tmp_path / "beta")
    action()

    assert [process.cwd for process in fake_popen] == [tmp_path / "beta", tmp_path / "alpha"]


def test_finished_scans_are_reaped(fake_popen: list[_FakeProcess]) -> None:
    action = CommandScanAction(["scan"])
    action()
    action()
    assert action.running == 2

    fake_popen[0].returncode = 0

    assert action.reap() == 1
    assert action.running == 1


def test_next_scan_reaps_finished_ones(fake_popen: list[_FakeProcess]) -> None:
    action = CommandScanAction(["scan"])
    action()
    fake_popen[0].returncode = 1

    action()

    assert action.running == 1


def test_launch_failure_is_logged(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    def _missing(*args: object, **kwargs: object) -> None:
        raise FileNotFoundError("no such command: scan")

    monkeypatch.setattr(scan_action.subprocess, "Popen", _missing)
    action = CommandScanAction(["scan"])

    action()

    assert action.running == 0
    assert "Failed to start scan command scan" in caplog.text


def test_logging_scan_action_names_root(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        LoggingScanAction()(tmp_path)

    assert str(tmp_path) in caplog.text
