"""Configuration-related exceptions."""

from __future__ import annotations

from secretstack.exceptions.base import SecretStackError


class ConfigError(SecretStackError, ValueError):
    """Raised when configuration is invalid or cannot be persisted."""
