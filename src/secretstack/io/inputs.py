"""Loaders for pattern catalogs and scan occurrence files.

Both accept YAML or JSON (JSON is parsed through the YAML loader).
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from secretstack.exceptions import ConfigError
from secretstack.model import OccurrenceRecord, SecretPatternDef


def load_catalog(path: Path) -> tuple[SecretPatternDef, ...]:
    """Load an ordered pattern catalog from a list of ``{name, severity}`` entries.

    The list may also be nested under a top-level ``patterns`` key.
    """
    raw = _load_document(path)
    if isinstance(raw, Mapping):
        raw = raw.get("patterns")
    if not isinstance(raw, list):
        raise ConfigError(f"Catalog at {path} must be a list of patterns")

    patterns: list[SecretPatternDef] = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ConfigError(f"Catalog entry {index} in {path} must be a mapping")
        name = entry.get("name")
        severity = entry.get("severity")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"Catalog entry {index} in {path} needs a non-empty string name")
        if not isinstance(severity, str):
            raise ConfigError(f"Catalog entry {name!r} in {path} needs a string severity")
        patterns.append(SecretPatternDef(name=name, severity=severity))
    return tuple(patterns)


def load_occurrences(path: Path) -> dict[str, OccurrenceRecord]:
    """Load per-pattern occurrence records keyed by pattern name."""
    raw = _load_document(path)
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Scan results at {path} must be a mapping of pattern name to occurrences")

    occurrences: dict[str, OccurrenceRecord] = {}
    for name, entry in raw.items():
        if not isinstance(entry, Mapping):
            raise ConfigError(f"Occurrences for {name!r} in {path} must be a mapping")
        count = entry.get("count", 0)
        if isinstance(count, bool) or not isinstance(count, int):
            raise ConfigError(f"occurrences.{name}.count must be an integer")
        files = entry.get("files", [])
        if not isinstance(files, list) or not all(isinstance(item, str) for item in files):
            raise ConfigError(f"occurrences.{name}.files must be a list of strings")
        occurrences[str(name)] = OccurrenceRecord(count=count, files=frozenset(files))
    return occurrences


def _load_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML/JSON at {path}: {exc}") from exc
