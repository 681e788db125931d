"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

SeverityLevel: TypeAlias = Literal["High", "Medium", "Low", "Unknown"]
ColorTag: TypeAlias = Literal["red", "orange", "green", "gray"]
PromptMode: TypeAlias = Literal["always", "30days", "disabled"]
PromptChoice: TypeAlias = Literal["Yes", "No", "Remind me in 30 days", "Disable"]
ConfigScope: TypeAlias = Literal["workspace", "global"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
