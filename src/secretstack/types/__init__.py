"""Shared type aliases for Secretstack."""

from .common import (
    ColorTag,
    ConfigScope,
    JsonObject,
    JsonScalar,
    JsonValue,
    PromptChoice,
    PromptMode,
    SeverityLevel,
)

__all__ = [
    "ColorTag",
    "ConfigScope",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PromptChoice",
    "PromptMode",
    "SeverityLevel",
]
