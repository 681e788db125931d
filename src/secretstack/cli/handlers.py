"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from secretstack.cli.watch_loop import WatchLoop
from secretstack.config import ConfigStore, SecretStackConfig, load_config, validate_config_file
from secretstack.constants.prompt import CHOICE_YES
from secretstack.constants.validation import CFG010
from secretstack.exceptions import SecretStackError
from secretstack.exceptions.validation import ValidationError, format_errors
from secretstack.ignore_file import ensure_ignored
from secretstack.io import load_catalog, load_occurrences
from secretstack.prompt import AutoPromptSurface, ConsolePromptSurface, PromptScheduler, PromptSurface
from secretstack.reporting import RiskReporter, write_risk_report
from secretstack.scan_action import CommandScanAction, LoggingScanAction, ScanAction
from secretstack.scoring import rank_pattern_risks
from secretstack.state import StateStore

logger = logging.getLogger(__name__)


def handle_risk(args: argparse.Namespace) -> int:
    """Score a scan's pattern matches against a catalog."""
    try:
        catalog = load_catalog(args.catalog)
        occurrences = load_occurrences(args.scan)
    except SecretStackError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    risks = rank_pattern_risks(catalog, occurrences)

    if args.output_dir is not None:
        try:
            path = write_risk_report(args.output_dir, risks)
        except OSError as exc:
            print(f"Report error: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote risk report to %s", path)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        print(RiskReporter(risks, color=use_color).render())
    return 0


def handle_prompt(args: argparse.Namespace) -> int:
    """Evaluate the commit-time prompt once, as if a commit had just happened."""
    roots = _resolve_roots(args.root)
    if roots is None:
        return 2
    config = _config_store(args, roots)
    settings = _load_settings(config)
    if settings is None:
        return 2
    if settings.prompt_disabled:
        logger.info("Scan prompt is disabled; set promptToScanBeforePush to re-enable it")
    elif settings.prompt_throttled:
        logger.debug("Scan prompt is limited to once every 30 days")
    surface = _surface(args.answer)
    scheduler = _scheduler(args, config, surface, roots[0])
    selection = scheduler.run_prompt()
    if selection is None:
        logger.debug("No scan prompt answer recorded")
    return 0


def handle_watch(args: argparse.Namespace) -> int:
    """Watch every root's commit log and prompt after each commit."""
    roots = _resolve_roots(args.root)
    if roots is None:
        return 2
    config = _config_store(args, roots)
    settings = _load_settings(config)
    if settings is None:
        return 2
    surface = _surface(args.answer)
    scheduler = _scheduler(args, config, surface, roots[0])
    loop = WatchLoop(roots, config, scheduler, surface)

    failures = loop.start()
    if len(failures) == len(roots):
        loop.stop()
        print("Watch error: no commit log could be watched", file=sys.stderr)
        return 1

    logger.info(
        "Watching %d root(s) for commits (prompt mode: %s)",
        len(roots) - len(failures),
        settings.prompt_to_scan_before_push,
    )
    try:
        loop.run(interval=args.interval, iterations=1 if args.once else None)
    except KeyboardInterrupt:
        logger.info("Stopped watching")
    return 0


def handle_gitignore(args: argparse.Namespace) -> int:
    """Offer to add the report folder to each root's ignore file."""
    roots = _resolve_roots(args.root)
    if roots is None:
        return 2
    config = _config_store(args, roots)
    settings = _load_settings(config)
    if settings is None:
        return 2
    if not settings.add_to_gitignore:
        logger.info("addToGitIgnore is off; leaving ignore files unchanged")
        return 0
    surface: PromptSurface = AutoPromptSurface(CHOICE_YES) if args.yes else ConsolePromptSurface()
    report = ensure_ignored(roots, config, surface)
    if report is not None and not report.updated:
        return 1
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate workspace and global settings files."""
    root = args.root.resolve()
    errors: list[ValidationError] = []
    if not root.is_dir():
        errors.append(
            ValidationError(code=CFG010, path=str(root), field="", message="workspace root directory not found")
        )
    else:
        for path in ConfigStore(workspace=root, global_path=args.global_config).paths():
            errors.extend(validate_config_file(path))

    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _resolve_roots(raw_roots: list[Path]) -> list[Path] | None:
    roots = [root.resolve() for root in raw_roots]
    missing = [root for root in roots if not root.is_dir()]
    if missing:
        for root in missing:
            print(f"Configuration error: root directory does not exist: {root}", file=sys.stderr)
        return None
    return roots


def _config_store(args: argparse.Namespace, roots: list[Path]) -> ConfigStore:
    workspace = args.workspace.resolve() if args.workspace is not None else roots[0]
    return ConfigStore(workspace=workspace, global_path=args.global_config)


def _load_settings(config: ConfigStore) -> SecretStackConfig | None:
    try:
        return load_config(config)
    except SecretStackError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None


def _surface(answer: str | None) -> PromptSurface:
    if answer is not None:
        return AutoPromptSurface(answer)
    return ConsolePromptSurface()


def _scheduler(args: argparse.Namespace, config: ConfigStore, surface: PromptSurface, cwd: Path) -> PromptScheduler:
    scan_action: ScanAction = (
        CommandScanAction.from_string(args.scan_command, cwd=cwd) if args.scan_command else LoggingScanAction()
    )
    return PromptScheduler(config, StateStore(args.state_file), surface, scan_action)
