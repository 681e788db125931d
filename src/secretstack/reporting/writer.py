"""JSON risk report writer."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from secretstack.constants.reporting import (
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    RISK_REPORT_FILENAME,
    SCHEMA_VERSION,
)
from secretstack.io import write_json_atomic
from secretstack.model import PatternRisk
from secretstack.scoring import highest_risk, severity_counts
from secretstack.types import JsonObject


def build_risk_report(risks: Sequence[PatternRisk]) -> JsonObject:
    """Build the JSON payload for a ranked risk list."""
    return {
        "schema_version": SCHEMA_VERSION,
        "top_risk": highest_risk(risks).to_dict(),
        "counts_by_severity": dict(severity_counts(risks)),
        "patterns": [item.to_dict() for item in risks],
    }


def write_risk_report(out_dir: Path, risks: Sequence[PatternRisk]) -> Path:
    """Write ``risk_report.json`` under ``out_dir`` and return its path."""
    path = out_dir / RISK_REPORT_FILENAME
    write_json_atomic(
        path=path,
        payload=build_risk_report(risks),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
