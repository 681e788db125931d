"""Reporting package for Secretstack outputs."""

from __future__ import annotations

from .stdout import RiskReporter
from .writer import build_risk_report, write_risk_report

__all__ = ["RiskReporter", "build_risk_report", "write_risk_report"]
