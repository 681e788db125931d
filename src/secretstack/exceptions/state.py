"""Exceptions for private state persistence and file watches."""

from __future__ import annotations

from secretstack.exceptions.base import SecretStackError


class StateError(SecretStackError, OSError):
    """Raised when the private prompt state cannot be read or written."""


class WatchError(SecretStackError, OSError):
    """Raised when a file-change watch cannot be established."""
