"""Data structures for formatsignals."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

# Signal values are flags or counts (char_count, word_count).
SignalValue = Union[bool, int]


@dataclass(slots=True, frozen=True)
class FormatMeta:
    slug: str
    name: str
    description: str


@dataclass(slots=True, frozen=True)
class Alternative:
    format: str
    confidence: int   # 0-100, normalized against this format's max score
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "confidence": self.confidence,
            "reason": self.reason,
        }


@dataclass(slots=True, frozen=True)
class Suggestion:
    suggested_format: str
    confidence: int
    reason: str
    alternatives: list[Alternative] = field(default_factory=list)
    signals: Mapping[str, SignalValue] = field(default_factory=dict)
    scores: Mapping[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "suggested_format": self.suggested_format,
            "confidence": self.confidence,
            "reason": self.reason,
            "alternatives": [alt.to_dict() for alt in self.alternatives],
            "signals": dict(self.signals),
            "scores": dict(self.scores),
        }


@dataclass(slots=True, frozen=True)
class ValidationResult:
    valid: bool
    format: str
    messages: list[str]   # hard failures
    warnings: list[str]   # soft issues
    signals: Mapping[str, SignalValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "format": self.format,
            "messages": list(self.messages),
            "warnings": list(self.warnings),
            "signals": dict(self.signals),
        }
