"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SECRETSTACK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SECRETSTACK",
    "     // secret-scan advisor for git workspaces",
)
RISK_SUMMARY_TITLE: str = "Risk summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} commit-time scan advisor"))
