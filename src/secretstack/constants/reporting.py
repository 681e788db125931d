"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

RISK_REPORT_FILENAME: str = "risk_report.json"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

COLOR_TAG_ANSI: dict[str, str] = {
    "red": ANSI_RED,
    "orange": ANSI_YELLOW,
    "green": ANSI_GREEN,
    "gray": ANSI_DIM,
}
