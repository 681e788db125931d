"""Keep the scan report folder out of version control.

For each workspace root that has a ``.git`` directory, the ``.gitignore`` is
created when missing and checked for the report folder entry. Roots missing
the entry are updated together after a single confirmation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from secretstack.config.loader import read_add_to_gitignore, read_ignore_folder
from secretstack.config.store import ConfigStore
from secretstack.constants.git import (
    GIT_DIRNAME,
    GITIGNORE_FILENAME,
    IGNORE_BLOCK_TEMPLATE,
    IGNORE_CONFIRM_TEMPLATE,
    IGNORE_FAILURE_TEMPLATE,
    IGNORE_SUCCESS_TEMPLATE,
)
from secretstack.constants.prompt import CHOICE_YES, CONFIRM_CHOICES
from secretstack.exceptions import SecretStackError
from secretstack.prompt.surface import PromptSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IgnoreTarget:
    """A root whose ignore file lacks the report folder entry."""

    name: str
    gitignore_path: Path


@dataclass(frozen=True)
class IgnoreUpdateReport:
    """Which roots were updated, which failed, and what to tell the user."""

    updated: tuple[str, ...]
    failed: tuple[str, ...]
    message: str


def find_roots_needing_update(roots: Iterable[Path], folder: str) -> list[IgnoreTarget]:
    """Return the version-controlled roots whose ignore file lacks ``folder``."""
    targets: list[IgnoreTarget] = []
    for root in roots:
        if not (root / GIT_DIRNAME).is_dir():
            continue
        gitignore_path = root / GITIGNORE_FILENAME
        try:
            content = gitignore_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            content = ""
            try:
                gitignore_path.write_text("", encoding="utf-8")
            except OSError as exc:
                logger.error("Failed to create %s in %s: %s", GITIGNORE_FILENAME, root.name, exc)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read %s in %s: %s", GITIGNORE_FILENAME, root.name, exc)
            continue
        if folder not in content:
            targets.append(IgnoreTarget(name=root.name, gitignore_path=gitignore_path))
    return targets


def apply_ignore_updates(targets: Iterable[IgnoreTarget], folder: str) -> IgnoreUpdateReport:
    """Append the ignore block to every target and report per-root results."""
    block = IGNORE_BLOCK_TEMPLATE.format(folder=folder)
    updated: list[str] = []
    failed: list[str] = []
    for target in targets:
        try:
            with target.gitignore_path.open("a", encoding="utf-8") as handle:
                handle.write(block)
        except OSError as exc:
            logger.error("Failed to modify %s in %s: %s", GITIGNORE_FILENAME, target.name, exc)
            failed.append(target.name)
            continue
        updated.append(target.name)

    if updated:
        message = IGNORE_SUCCESS_TEMPLATE.format(folder=folder, roots=", ".join(updated))
    else:
        message = IGNORE_FAILURE_TEMPLATE.format(folder=folder)
    return IgnoreUpdateReport(updated=tuple(updated), failed=tuple(failed), message=message)


def ensure_ignored(
    roots: Iterable[Path],
    config: ConfigStore,
    surface: PromptSurface,
) -> IgnoreUpdateReport | None:
    """Offer once to add the report folder to every root that still tracks it.

    Returns ``None`` when the feature is off, nothing needs updating, the
    settings cannot be read, or the user declines.
    """
    try:
        if not read_add_to_gitignore(config):
            return None
        folder = read_ignore_folder(config)
    except SecretStackError as exc:
        logger.error("Cannot read ignore-file settings: %s", exc)
        return None

    targets = find_roots_needing_update(roots, folder)
    if not targets:
        return None

    response = surface.choose(IGNORE_CONFIRM_TEMPLATE.format(folder=folder), CONFIRM_CHOICES)
    if response != CHOICE_YES:
        return None

    report = apply_ignore_updates(targets, folder)
    surface.inform(report.message)
    return report
