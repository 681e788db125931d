"""Tests for pattern risk scoring."""

from __future__ import annotations

import pytest

from secretstack.model import OccurrenceRecord, RiskRecord, SecretPatternDef
from secretstack.scoring import (
    UNKNOWN_RISK,
    compute_risk,
    highest_risk,
    rank_pattern_risks,
    resolve_severity,
    severity_counts,
)

CATALOG = (
    SecretPatternDef(name="AWS Access Key", severity="High"),
    SecretPatternDef(name="Slack Webhook", severity="Medium"),
    SecretPatternDef(name="Generic Password", severity="Low"),
)


@pytest.mark.parametrize(
    ("severity", "expected_score", "expected_color"),
    [
        ("High", 80, "red"),
        ("Medium", 50, "orange"),
        ("Low", 20, "green"),
    ],
    ids=["high", "medium", "low"],
)
def test_compute_risk_base_scores(severity: str, expected_score: int, expected_color: str) -> None:
    assert compute_risk(severity, 0) == RiskRecord(severity=severity, risk_score=expected_score, color=expected_color)


def test_compute_risk_adds_five_per_occurrence() -> None:
    assert compute_risk("Medium", 3).risk_score == 65
    assert compute_risk("Low", 1).risk_score == 25


def test_compute_risk_caps_at_one_hundred() -> None:
    assert compute_risk("High", 4).risk_score == 100
    assert compute_risk("High", 5).risk_score == 100
    assert compute_risk("High", 500).risk_score == 100
    assert compute_risk("Low", 1000).risk_score == 100


def test_compute_risk_is_monotonic_in_occurrences() -> None:
    for severity in ("High", "Medium", "Low", "Unknown"):
        scores = [compute_risk(severity, n).risk_score for n in range(30)]
        assert scores == sorted(scores)


def test_compute_risk_floors_negative_counts() -> None:
    assert compute_risk("Medium", -7).risk_score == 50


def test_compute_risk_unlisted_severity_scores_as_low_with_gray() -> None:
    record = compute_risk("Critical", 2)

    assert record == RiskRecord(severity="Critical", risk_score=30, color="gray")


def test_compute_risk_unknown_severity_is_gray() -> None:
    assert compute_risk("Unknown", 0) == RiskRecord(severity="Unknown", risk_score=20, color="gray")


def test_compute_risk_is_idempotent() -> None:
    assert compute_risk("High", 2) == compute_risk("High", 2)


def test_resolve_severity_uses_occurrence_count() -> None:
    occurrences = {"Slack Webhook": OccurrenceRecord(count=2, files=frozenset({"a.py"}))}

    record = resolve_severity("Slack Webhook", CATALOG, occurrences)

    assert record == RiskRecord(severity="Medium", risk_score=60, color="orange")


def test_resolve_severity_missing_occurrence_counts_as_zero() -> None:
    assert resolve_severity("AWS Access Key", CATALOG, {}).risk_score == 80


def test_resolve_severity_unknown_pattern_returns_sentinel() -> None:
    record = resolve_severity("unknown-pattern", CATALOG, {})

    assert record == RiskRecord(severity="Unknown", risk_score=0, color="gray")
    assert record == UNKNOWN_RISK
    assert record.to_dict() == {"severity": "Unknown", "riskScore": 0, "color": "gray"}


def test_resolve_severity_sentinel_differs_from_scored_low() -> None:
    low = resolve_severity("Generic Password", CATALOG, {})

    assert low != UNKNOWN_RISK
    assert low.severity == "Low"


def test_resolve_severity_first_duplicate_wins() -> None:
    catalog = (
        SecretPatternDef(name="Token", severity="Low"),
        SecretPatternDef(name="Token", severity="High"),
    )

    assert resolve_severity("Token", catalog, {}).severity == "Low"


def test_rank_pattern_risks_orders_highest_first() -> None:
    occurrences = {
        "Generic Password": OccurrenceRecord(count=1, files=frozenset({"b.py", "a.py"})),
        "AWS Access Key": OccurrenceRecord(count=1),
        "Not In Catalog": OccurrenceRecord(count=9),
        "Slack Webhook": OccurrenceRecord(count=0),
    }

    ranked = rank_pattern_risks(CATALOG, occurrences)

    assert [item.name for item in ranked] == [
        "AWS Access Key",
        "Slack Webhook",
        "Generic Password",
        "Not In Catalog",
    ]
    assert ranked[2].files == ("a.py", "b.py")
    assert ranked[3].risk == UNKNOWN_RISK
    assert ranked[3].count == 9


def test_severity_counts_has_stable_keys() -> None:
    ranked = rank_pattern_risks(CATALOG, {"AWS Access Key": OccurrenceRecord(count=1)})

    assert severity_counts(ranked) == {"High": 1, "Medium": 0, "Low": 0, "Unknown": 0}


def test_highest_risk_empty_is_sentinel() -> None:
    assert highest_risk([]) == UNKNOWN_RISK
