"""Private prompt state persistence."""

from .store import StateStore

__all__ = ["StateStore"]
