"""Stdout reporter for pattern risk tables."""

from __future__ import annotations

from collections.abc import Sequence

from secretstack.constants.branding import ASCII_LOGO_LINES, RISK_SUMMARY_TITLE
from secretstack.constants.reporting import ANSI_RESET, COLOR_TAG_ANSI
from secretstack.model import PatternRisk, RiskRecord
from secretstack.scoring import highest_risk, severity_counts


def _colorize(text: str, color_tag: str) -> str:
    ansi = COLOR_TAG_ANSI.get(color_tag, "")
    return f"{ansi}{text}{ANSI_RESET}" if ansi else text


class RiskReporter:
    """Formats ranked pattern risks as human-readable stdout output."""

    def __init__(self, risks: Sequence[PatternRisk], *, color: bool = True) -> None:
        self._risks = list(risks)
        self._color = color

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_table()]
        return "\n".join(section for section in sections if section)

    def _paint(self, text: str, record: RiskRecord) -> str:
        return _colorize(text, record.color) if self._color else text

    def _render_header(self) -> str:
        top = highest_risk(self._risks)
        counts = severity_counts(self._risks)
        occurrences = sum(max(0, item.count) for item in self._risks)
        breakdown = " / ".join(f"{count} {level.lower()}" for level, count in counts.items())

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {RISK_SUMMARY_TITLE}",
            "  " + "─" * 38,
            "",
            f"  Top risk    {self._paint(str(top.risk_score), top)} ({self._paint(top.severity, top)})",
            f"  Patterns    {len(self._risks)} matched / {occurrences} occurrences",
            f"  Severities  {breakdown}",
            "",
        ]
        return "\n".join(lines)

    def _render_table(self) -> str:
        if not self._risks:
            return "  No secret patterns matched."

        w_name = max(24, *(len(item.name) for item in self._risks))
        w_sev = 8
        w_score = 5
        w_count = 5

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_name + 2)}{mid}{'─' * (w_sev + 2)}"
                f"{mid}{'─' * (w_score + 2)}{mid}{'─' * (w_count + 2)}{right}"
            )

        header = (
            f"  │ {'Pattern':<{w_name}} │ {'Severity':<{w_sev}}"
            f" │ {'Risk':>{w_score}} │ {'Count':>{w_count}} │"
        )
        lines = ["  Patterns", _hline("┌", "┬", "┐"), header, _hline("├", "┼", "┤")]
        for item in self._risks:
            # Pad before colouring so ANSI codes do not skew column widths.
            severity = self._paint(f"{item.risk.severity:<{w_sev}}", item.risk)
            score = self._paint(f"{item.risk.risk_score:>{w_score}}", item.risk)
            lines.append(
                f"  │ {item.name:<{w_name}} │ {severity} │ {score} │ {item.count:>{w_count}} │"
            )
        lines.append(_hline("└", "┴", "┘"))
        return "\n".join(lines)
