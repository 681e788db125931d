"""Root exception for Secretstack."""

from __future__ import annotations


class SecretStackError(Exception):
    """Base class for all Secretstack errors."""
