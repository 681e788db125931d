"""Shared exception hierarchy for Secretstack."""

from __future__ import annotations

from .base import SecretStackError
from .config import ConfigError
from .state import StateError, WatchError

__all__ = ["ConfigError", "SecretStackError", "StateError", "WatchError"]
