"""Data models for quality-gates.

Every model here is a frozen value: the engine builds them once per analysis
and nothing mutates them afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Severity = Literal["error", "warning"]

SEVERITIES: tuple[str, ...] = ("error", "warning")


@dataclass(frozen=True)
class SourceUnit:
    """One unit of source text handed to the analyzer."""

    text: str

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @property
    def total_lines(self) -> int:
        return self.text.count("\n") + 1

    def line_at(self, offset: int) -> int:
        """Map a character offset to its 1-indexed line number."""
        return self.text.count("\n", 0, max(offset, 0)) + 1


@dataclass(frozen=True)
class Violation:
    """A single rule finding.

    Attributes:
        line: 1-indexed line the finding is attached to
        rule: Stable rule identifier (e.g. "any-type", "complexity")
        severity: "error" or "warning"
        message: Human-readable description
    """

    line: int
    rule: str
    severity: Severity
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "rule": self.rule,
            "severity": self.severity,
            "message": self.message,
        }


@dataclass(frozen=True)
class Param:
    """A parameter recovered from a function header."""

    name: str
    type: str = "unknown"

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class FunctionRecord:
    """Metrics for one recovered function span.

    Attributes:
        name: Function name from the header
        start_line: Line of the header match (1-indexed)
        line_count: Lines spanned by the recovered body, braces included
        complexity: Heuristic cyclomatic complexity (>= 1)
        has_early_validation: Guard clause found near the top of the body
        has_any_type: Body contains an ``: any`` annotation
        has_magic_number: Body contains a literal outside the allow-list
        params: Parameters in declaration order
    """

    name: str
    start_line: int
    line_count: int
    complexity: int
    has_early_validation: bool
    has_any_type: bool
    has_magic_number: bool
    params: tuple[Param, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "startLine": self.start_line,
            "lines": self.line_count,
            "complexity": self.complexity,
            "hasEarlyValidation": self.has_early_validation,
            "hasAnyType": self.has_any_type,
            "hasMagicNumber": self.has_magic_number,
            "params": [p.to_dict() for p in self.params],
        }


@dataclass(frozen=True)
class QualityReport:
    """Result of analyzing one source unit."""

    total_lines: int
    functions: tuple[FunctionRecord, ...]
    violations: tuple[Violation, ...]
    score: int

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == "warning")

    def violations_for(self, rule: str) -> list[Violation]:
        return [v for v in self.violations if v.rule == rule]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalLines": self.total_lines,
            "functions": [f.to_dict() for f in self.functions],
            "violations": [v.to_dict() for v in self.violations],
            "score": self.score,
        }
