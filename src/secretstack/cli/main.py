"""CLI entrypoint for Secretstack."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from secretstack import __version__
from secretstack.cli.handlers import (
    handle_gitignore,
    handle_prompt,
    handle_risk,
    handle_validate_config,
    handle_watch,
)
from secretstack.constants.branding import CLI_DESCRIPTION
from secretstack.constants.prompt import PROMPT_CHOICES
from secretstack.constants.watch import DEFAULT_POLL_INTERVAL_SECONDS, MIN_POLL_INTERVAL_SECONDS


def _interval(value: str) -> float:
    seconds = float(value)
    if seconds < MIN_POLL_INTERVAL_SECONDS:
        raise argparse.ArgumentTypeError(f"interval must be at least {MIN_POLL_INTERVAL_SECONDS} seconds")
    return seconds


def _add_settings_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-w",
        "--workspace",
        type=Path,
        default=None,
        help="Directory holding workspace settings (defaults to the first root)",
    )
    parser.add_argument("--global-config", type=Path, default=None, help="Global settings file override")
    parser.add_argument("--state-file", type=Path, default=None, help="Private prompt state file override")


def _add_prompt_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        action="append",
        required=True,
        help="Workspace root (repeat for multi-root workspaces)",
    )
    parser.add_argument("--scan-command", default=None, help="Command started when the user accepts a scan")
    parser.add_argument("--answer", choices=PROMPT_CHOICES, default=None, help="Answer prompts non-interactively")
    _add_settings_args(parser)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="secretstack",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    risk = subparsers.add_parser("risk", help="Score secret pattern matches from a scan")
    risk.add_argument("-c", "--catalog", type=Path, required=True, help="Pattern catalog (YAML or JSON)")
    risk.add_argument("-s", "--scan", type=Path, required=True, help="Scan occurrences file (YAML or JSON)")
    risk.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for risk_report.json (no files written if omitted)",
    )
    risk.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    risk.add_argument("--no-color", action="store_true", help="Disable colored output")

    prompt = subparsers.add_parser("prompt", help="Run the commit-time scan prompt once")
    _add_prompt_args(prompt)

    watch = subparsers.add_parser("watch", help="Watch commit logs and prompt after each commit")
    _add_prompt_args(watch)
    watch.add_argument(
        "--interval",
        type=_interval,
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        help="Seconds between polls",
    )
    watch.add_argument("--once", action="store_true", help="Poll a single time and exit")

    gitignore = subparsers.add_parser("gitignore", help="Add the report folder to each root's .gitignore")
    gitignore.add_argument("-r", "--root", type=Path, action="append", required=True, help="Workspace root")
    gitignore.add_argument("-y", "--yes", action="store_true", help="Confirm without asking")
    _add_settings_args(gitignore)

    validate = subparsers.add_parser("validate-config", help="Validate settings files")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    validate.add_argument("--global-config", type=Path, default=None, help="Global settings file override")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    handlers = {
        "risk": handle_risk,
        "prompt": handle_prompt,
        "watch": handle_watch,
        "gitignore": handle_gitignore,
        "validate-config": handle_validate_config,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
