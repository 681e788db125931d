"""Commit-time scan prompt scheduling."""

from .scheduler import PersistOutcome, PromptScheduler, WriteFailure, should_prompt
from .surface import AutoPromptSurface, ConsolePromptSurface, PromptSurface, match_choice

__all__ = [
    "AutoPromptSurface",
    "ConsolePromptSurface",
    "PersistOutcome",
    "PromptScheduler",
    "PromptSurface",
    "WriteFailure",
    "match_choice",
    "should_prompt",
]
