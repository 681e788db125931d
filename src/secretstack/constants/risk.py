"""Constants for severity base scores, colours and ranking."""

from __future__ import annotations

HIGH_BASE_SCORE: int = 80
MEDIUM_BASE_SCORE: int = 50
DEFAULT_BASE_SCORE: int = 20

OCCURRENCE_WEIGHT: int = 5
MAX_RISK_SCORE: int = 100

BASE_SCORES: dict[str, int] = {
    "High": HIGH_BASE_SCORE,
    "Medium": MEDIUM_BASE_SCORE,
}

SEVERITY_COLORS: dict[str, str] = {
    "High": "red",
    "Medium": "orange",
    "Low": "green",
    "Unknown": "gray",
}
DEFAULT_COLOR: str = "gray"

UNKNOWN_SEVERITY: str = "Unknown"

# Display order only; risk math never consults it.
SEVERITY_DISPLAY_RANK: dict[str, int] = {"High": 0, "Medium": 1, "Low": 2, "Unknown": 3}
SEVERITY_LEVELS: tuple[str, ...] = ("High", "Medium", "Low", "Unknown")
