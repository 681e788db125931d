"""Config file validation for Secretstack settings."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from secretstack.constants.config import (
    ADD_TO_GITIGNORE_KEY,
    CONFIG_KEYS,
    IGNORE_FOLDER_KEY,
    PROMPT_MODE_KEY,
)
from secretstack.constants.prompt import VALID_PROMPT_MODES
from secretstack.constants.validation import CFG002, CFG003, CFG004, CFG005, CFG006
from secretstack.exceptions.validation import ValidationError


def validate_config_file(path: Path) -> list[ValidationError]:
    """Validate one settings file and return all validation errors.

    A missing file is valid (every key falls back to its default). This
    never raises; all problems are returned as :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    path_str = str(path)

    if not path.exists():
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"unreadable file: {exc}"))
        return errors
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, CONFIG_KEYS),
                )
            )

    if PROMPT_MODE_KEY in raw:
        val = raw[PROMPT_MODE_KEY]
        if not isinstance(val, str) or val not in VALID_PROMPT_MODES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=PROMPT_MODE_KEY,
                    message=f"invalid value for `{PROMPT_MODE_KEY}`",
                    hint=f"expected one of: {', '.join(sorted(VALID_PROMPT_MODES))}; got: {val!r}",
                )
            )

    if ADD_TO_GITIGNORE_KEY in raw and not isinstance(raw[ADD_TO_GITIGNORE_KEY], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=ADD_TO_GITIGNORE_KEY,
                message=f"`{ADD_TO_GITIGNORE_KEY}` must be a boolean",
            )
        )

    if IGNORE_FOLDER_KEY in raw:
        val = raw[IGNORE_FOLDER_KEY]
        if not isinstance(val, str) or not val.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=IGNORE_FOLDER_KEY,
                    message=f"`{IGNORE_FOLDER_KEY}` must be a non-empty string",
                )
            )

    return errors


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
