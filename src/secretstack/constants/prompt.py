"""Constants for the commit-time scan prompt."""

from __future__ import annotations

MODE_ALWAYS: str = "always"
MODE_THIRTY_DAYS: str = "30days"
MODE_DISABLED: str = "disabled"
VALID_PROMPT_MODES: frozenset[str] = frozenset({MODE_ALWAYS, MODE_THIRTY_DAYS, MODE_DISABLED})
DEFAULT_PROMPT_MODE: str = MODE_ALWAYS

THIRTY_DAYS_MS: int = 30 * 24 * 60 * 60 * 1000

CHOICE_YES: str = "Yes"
CHOICE_NO: str = "No"
CHOICE_REMIND: str = "Remind me in 30 days"
CHOICE_DISABLE: str = "Disable"
PROMPT_CHOICES: tuple[str, ...] = (CHOICE_YES, CHOICE_NO, CHOICE_REMIND, CHOICE_DISABLE)
CONFIRM_CHOICES: tuple[str, ...] = (CHOICE_YES, CHOICE_NO)

SCAN_PROMPT_MESSAGE: str = (
    "You have committed changes. Would you like to run a scan for secrets before pushing?"
)
SCAN_STARTED_MESSAGE: str = "Starting secret scan..."
REMIND_ACK_MESSAGE: str = "Secret scan prompts will be suppressed for 30 days."
DISABLE_ACK_MESSAGE: str = "Secret scan prompts have been disabled in settings."
