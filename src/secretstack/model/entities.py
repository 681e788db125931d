"""Core dataclasses for pattern catalogs, occurrences, risk and prompt state."""

from __future__ import annotations

from dataclasses import dataclass, field

from secretstack.constants.prompt import DEFAULT_PROMPT_MODE
from secretstack.types import JsonObject


@dataclass(frozen=True)
class SecretPatternDef:
    """Catalog entry mapping a pattern name to its severity class."""

    name: str
    severity: str


@dataclass(frozen=True)
class OccurrenceRecord:
    """How often, and where, one pattern matched during a scan."""

    count: int = 0
    files: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class RiskRecord:
    """Derived risk projection of a severity and occurrence count."""

    severity: str
    risk_score: int
    color: str

    def to_dict(self) -> JsonObject:
        return {"severity": self.severity, "riskScore": self.risk_score, "color": self.color}


@dataclass(frozen=True)
class PatternRisk:
    """Risk record for one matched pattern, with its occurrence context."""

    name: str
    risk: RiskRecord
    count: int = 0
    files: tuple[str, ...] = ()

    def to_dict(self) -> JsonObject:
        payload: JsonObject = {"name": self.name, "count": self.count, "files": list(self.files)}
        payload.update(self.risk.to_dict())
        return payload


@dataclass(frozen=True)
class PromptState:
    """Persisted prompt preferences, read fresh for every decision.

    ``prompt_mode`` holds the raw setting string so that an unrecognized
    value survives the read and is rejected by the decision itself.
    """

    last_prompt_timestamp: int = 0
    prompt_mode: str = DEFAULT_PROMPT_MODE
