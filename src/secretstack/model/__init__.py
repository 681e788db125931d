"""Core data models for Secretstack."""

from .entities import (
    OccurrenceRecord,
    PatternRisk,
    PromptState,
    RiskRecord,
    SecretPatternDef,
)

__all__ = [
    "OccurrenceRecord",
    "PatternRisk",
    "PromptState",
    "RiskRecord",
    "SecretPatternDef",
]
