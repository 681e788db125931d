"""Polling defaults for file-change watches."""

from __future__ import annotations

DEFAULT_POLL_INTERVAL_SECONDS: float = 2.0
MIN_POLL_INTERVAL_SECONDS: float = 0.1
