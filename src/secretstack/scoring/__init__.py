"""Risk scoring for secret pattern matches."""

from .risk import (
    UNKNOWN_RISK,
    compute_risk,
    highest_risk,
    rank_pattern_risks,
    resolve_severity,
    severity_counts,
)

__all__ = [
    "UNKNOWN_RISK",
    "compute_risk",
    "highest_risk",
    "rank_pattern_risks",
    "resolve_severity",
    "severity_counts",
]
