"""Risk scoring for matched secret patterns."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence

from secretstack.constants.risk import (
    BASE_SCORES,
    DEFAULT_BASE_SCORE,
    DEFAULT_COLOR,
    MAX_RISK_SCORE,
    OCCURRENCE_WEIGHT,
    SEVERITY_COLORS,
    SEVERITY_DISPLAY_RANK,
    SEVERITY_LEVELS,
    UNKNOWN_SEVERITY,
)
from secretstack.model import OccurrenceRecord, PatternRisk, RiskRecord, SecretPatternDef

UNKNOWN_RISK: RiskRecord = RiskRecord(severity=UNKNOWN_SEVERITY, risk_score=0, color=DEFAULT_COLOR)


def compute_risk(severity: str, occurrence_count: int) -> RiskRecord:
    """Project a severity and occurrence count onto a bounded risk record.

    High starts at 80, Medium at 50 and every other severity at 20; each
    occurrence adds 5, capped at 100. Negative counts are floored to zero.
    """
    base = BASE_SCORES.get(severity, DEFAULT_BASE_SCORE)
    score = min(MAX_RISK_SCORE, base + OCCURRENCE_WEIGHT * max(0, occurrence_count))
    return RiskRecord(
        severity=severity,
        risk_score=score,
        color=SEVERITY_COLORS.get(severity, DEFAULT_COLOR),
    )


def resolve_severity(
    pattern_name: str,
    catalog: Sequence[SecretPatternDef],
    occurrences: Mapping[str, OccurrenceRecord],
) -> RiskRecord:
    """Resolve a pattern by name against the catalog and score it.

    The first catalog entry with a matching name wins. Unknown patterns
    yield ``UNKNOWN_RISK``, which is distinct from a scored Low finding.
    """
    pattern = next((entry for entry in catalog if entry.name == pattern_name), None)
    if pattern is None:
        return UNKNOWN_RISK

    record = occurrences.get(pattern_name)
    return compute_risk(pattern.severity, record.count if record is not None else 0)


def rank_pattern_risks(
    catalog: Sequence[SecretPatternDef],
    occurrences: Mapping[str, OccurrenceRecord],
) -> list[PatternRisk]:
    """Score every pattern that matched in a scan, highest risk first."""
    risks = [
        PatternRisk(
            name=name,
            risk=resolve_severity(name, catalog, occurrences),
            count=record.count,
            files=tuple(sorted(record.files)),
        )
        for name, record in occurrences.items()
    ]
    return sorted(
        risks,
        key=lambda item: (
            -item.risk.risk_score,
            SEVERITY_DISPLAY_RANK.get(item.risk.severity, len(SEVERITY_DISPLAY_RANK)),
            item.name,
        ),
    )


def severity_counts(risks: Sequence[PatternRisk]) -> dict[str, int]:
    """Count ranked patterns by severity with stable keys."""
    counts = Counter(item.risk.severity for item in risks)
    return {level: int(counts.get(level, 0)) for level in SEVERITY_LEVELS}


def highest_risk(risks: Sequence[PatternRisk]) -> RiskRecord:
    """Return the highest-scoring risk record, or the unknown sentinel when empty."""
    if not risks:
        return UNKNOWN_RISK
    return max(risks, key=lambda item: item.risk.risk_score).risk
