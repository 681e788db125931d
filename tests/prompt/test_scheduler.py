"""Tests for prompt scheduling against persisted settings and state."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from fakes import FakeSurface, RecordingScanAction
from secretstack.config import ConfigStore
from secretstack.constants.prompt import (
    DISABLE_ACK_MESSAGE,
    PROMPT_CHOICES,
    REMIND_ACK_MESSAGE,
    SCAN_PROMPT_MESSAGE,
    SCAN_STARTED_MESSAGE,
)
from secretstack.exceptions import ConfigError, StateError
from secretstack.prompt import PromptScheduler
from secretstack.state import StateStore

DAY_MS = 24 * 60 * 60 * 1000
NOW = 1_760_000_000_000


def _scheduler(
    config_store: ConfigStore,
    state_store: StateStore,
    surface: FakeSurface | None = None,
    scan_action: RecordingScanAction | None = None,
) -> PromptScheduler:
    return PromptScheduler(
        config_store,
        state_store,
        surface if surface is not None else FakeSurface(),
        scan_action if scan_action is not None else RecordingScanAction(),
        clock=lambda: NOW,
    )


def test_yes_starts_scan_and_records_time(config_store: ConfigStore, state_store: StateStore) -> None:
    surface = FakeSurface()
    scan = RecordingScanAction()
    scheduler = _scheduler(config_store, state_store, surface, scan)

    outcome = scheduler.apply_response("Yes", NOW)

    assert outcome.ok
    assert scan.calls == 1
    assert state_store.last_prompt_timestamp() == NOW
    assert config_store.get("promptToScanBeforePush") is None
    assert surface.messages == [SCAN_STARTED_MESSAGE]


def test_no_changes_nothing(config_store: ConfigStore, state_store: StateStore) -> None:
    surface = FakeSurface()
    scheduler = _scheduler(config_store, state_store, surface)

    outcome = scheduler.apply_response("No", NOW)

    assert outcome.written == ()
    assert not state_store.path.exists()
    assert config_store.workspace_path is not None
    assert not config_store.workspace_path.exists()
    assert surface.messages == []


def test_dismissed_prompt_changes_nothing(config_store: ConfigStore, state_store: StateStore) -> None:
    outcome = _scheduler(config_store, state_store).apply_response(None, NOW)

    assert outcome.written == ()
    assert not state_store.path.exists()


def test_remind_sets_time_and_mode(config_store: ConfigStore, state_store: StateStore) -> None:
    surface = FakeSurface()
    scheduler = _scheduler(config_store, state_store, surface)

    outcome = scheduler.apply_response("Remind me in 30 days", NOW)

    assert outcome.written == ("lastSecretScanPromptTime", "promptToScanBeforePush")
    assert state_store.last_prompt_timestamp() == NOW
    assert config_store.get("promptToScanBeforePush") == "30days"
    assert surface.messages == [REMIND_ACK_MESSAGE]


def test_remind_then_gate_over_time(config_store: ConfigStore, state_store: StateStore) -> None:
    scheduler = _scheduler(config_store, state_store)
    scheduler.apply_response("Remind me in 30 days", NOW)

    assert scheduler.should_prompt(NOW + 10 * DAY_MS) is False
    assert scheduler.should_prompt(NOW + 31 * DAY_MS) is True


def test_disable_sets_mode_only(config_store: ConfigStore, state_store: StateStore) -> None:
    state_store.set_last_prompt_timestamp(123)
    surface = FakeSurface()
    scheduler = _scheduler(config_store, state_store, surface)

    scheduler.apply_response("Disable", NOW)

    assert config_store.get("promptToScanBeforePush") == "disabled"
    assert state_store.last_prompt_timestamp() == 123
    assert surface.messages == [DISABLE_ACK_MESSAGE]
    assert scheduler.should_prompt(NOW + 400 * DAY_MS) is False


def test_mode_is_written_to_workspace_scope(config_store: ConfigStore, state_store: StateStore) -> None:
    _scheduler(config_store, state_store).apply_response("Disable", NOW)

    assert config_store.workspace_path is not None
    written = yaml.safe_load(config_store.workspace_path.read_text(encoding="utf-8"))
    assert written == {"promptToScanBeforePush": "disabled"}
    assert not config_store.global_path.exists()


def test_mode_is_written_to_global_scope_without_workspace(tmp_path: Path, state_store: StateStore) -> None:
    store = ConfigStore(global_path=tmp_path / "global.yaml")

    _scheduler(store, state_store).apply_response("Disable", NOW)

    assert yaml.safe_load(store.global_path.read_text(encoding="utf-8")) == {"promptToScanBeforePush": "disabled"}


def test_should_prompt_reads_settings_fresh(config_store: ConfigStore, state_store: StateStore) -> None:
    scheduler = _scheduler(config_store, state_store)
    assert scheduler.should_prompt(NOW) is True

    assert config_store.workspace_path is not None
    config_store.workspace_path.write_text("promptToScanBeforePush: disabled\n", encoding="utf-8")
    assert scheduler.should_prompt(NOW) is False

    config_store.workspace_path.write_text("promptToScanBeforePush: always\n", encoding="utf-8")
    assert scheduler.should_prompt(NOW) is True


def test_external_edit_can_reenable_disabled_prompt(config_store: ConfigStore, state_store: StateStore) -> None:
    scheduler = _scheduler(config_store, state_store)
    scheduler.apply_response("Disable", NOW)

    config_store.update("promptToScanBeforePush", "always")

    assert scheduler.should_prompt(NOW) is True


def test_invalid_mode_in_settings_fails_closed(config_store: ConfigStore, state_store: StateStore) -> None:
    config_store.update("promptToScanBeforePush", "weekly")

    assert _scheduler(config_store, state_store).should_prompt(NOW) is False


def test_unreadable_settings_fail_closed(config_store: ConfigStore, state_store: StateStore) -> None:
    assert config_store.workspace_path is not None
    config_store.workspace_path.write_text("promptToScanBeforePush: [unclosed\n", encoding="utf-8")

    assert _scheduler(config_store, state_store).should_prompt(NOW) is False


def test_corrupt_state_fails_closed(config_store: ConfigStore, state_store: StateStore) -> None:
    state_store.path.parent.mkdir(parents=True, exist_ok=True)
    state_store.path.write_text("{not json", encoding="utf-8")

    assert _scheduler(config_store, state_store).should_prompt(NOW) is False


def test_run_prompt_presents_four_choices(config_store: ConfigStore, state_store: StateStore) -> None:
    surface = FakeSurface("Remind me in 30 days")
    scheduler = _scheduler(config_store, state_store, surface)

    selection = scheduler.run_prompt(NOW)

    assert selection == "Remind me in 30 days"
    assert surface.asked == [(SCAN_PROMPT_MESSAGE, PROMPT_CHOICES)]
    assert config_store.get("promptToScanBeforePush") == "30days"


def test_run_prompt_skips_when_disabled(config_store: ConfigStore, state_store: StateStore) -> None:
    config_store.update("promptToScanBeforePush", "disabled")
    surface = FakeSurface("Yes")

    assert _scheduler(config_store, state_store, surface).run_prompt(NOW) is None
    assert surface.asked == []


def test_unrecognized_answer_is_ignored(config_store: ConfigStore, state_store: StateStore) -> None:
    outcome = _scheduler(config_store, state_store).apply_response("Maybe later", NOW)

    assert outcome.written == ()
    assert not state_store.path.exists()


class _FailingState(StateStore):
    def update(self, key: str, value: object) -> None:
        raise StateError("disk full")


class _FailingConfig(ConfigStore):
    def update(self, key: str, value: object, scope: str | None = None) -> Path:
        raise ConfigError("read-only settings")


def test_write_failures_are_reported_not_raised(workspace: Path, tmp_path: Path) -> None:
    surface = FakeSurface()
    scheduler = _scheduler(
        _FailingConfig(workspace=workspace, global_path=tmp_path / "g.yaml"),
        _FailingState(tmp_path / "state.json"),
        surface,
    )

    outcome = scheduler.apply_response("Remind me in 30 days", NOW)

    assert not outcome.ok
    assert [failure.key for failure in outcome.failures] == ["lastSecretScanPromptTime", "promptToScanBeforePush"]
    assert surface.messages == [REMIND_ACK_MESSAGE]


def test_partial_write_failure_keeps_successful_writes(
    config_store: ConfigStore,
    tmp_path: Path,
) -> None:
    scheduler = _scheduler(config_store, _FailingState(tmp_path / "state.json"))

    outcome = scheduler.apply_response("Remind me in 30 days", NOW)

    assert outcome.written == ("promptToScanBeforePush",)
    assert config_store.get("promptToScanBeforePush") == "30days"


def test_failing_scan_action_does_not_raise(
    config_store: ConfigStore,
    state_store: StateStore,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def _boom(root: Path | None = None) -> None:
        raise RuntimeError("scanner crashed")

    scheduler = PromptScheduler(config_store, state_store, FakeSurface(), _boom, clock=lambda: NOW)

    outcome = scheduler.apply_response("Yes", NOW)

    assert outcome.ok
    assert state_store.last_prompt_timestamp() == NOW
    assert "Scan action failed" in caplog.text


def test_run_prompt_starts_scan_in_committing_root(
    config_store: ConfigStore,
    state_store: StateStore,
    tmp_path: Path,
) -> None:
    scan = RecordingScanAction()
    scheduler = _scheduler(config_store, state_store, FakeSurface("Yes"), scan)

    scheduler.run_prompt(NOW, root=tmp_path / "beta")

    assert scan.roots == [tmp_path / "beta"]
