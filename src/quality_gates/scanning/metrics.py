"""Per-function heuristics: complexity, early validation, parameters."""

from __future__ import annotations

import re

from ..config import ANY_TYPE_PATTERN
from ..models import Param

# Each pattern is counted on its own, so `else if` scores under
# `if`, `else if` and `else` alike.
COMPLEXITY_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        r"\bif\b",
        r"\belse\s+if\b",
        r"\belse\b",
        r"\bfor\b",
        r"\bwhile\b",
        r"\bdo\b",
        r"\bswitch\b",
        r"\bcase\b",
        r"\bcatch\b",
        r"&&",
        r"\|\|",
        r"\?\s*[^:]*\s*:",  # ternary
    )
)

_ANY_TYPE = re.compile(ANY_TYPE_PATTERN)
_PARAM_LIST = re.compile(r"\(([^)]*)\)")


def calculate_complexity(code: str) -> int:
    """Estimate cyclomatic complexity from keyword and operator counts."""
    complexity = 1
    for pattern in COMPLEXITY_PATTERNS:
        complexity += len(pattern.findall(code))
    return complexity


def has_early_validation(lines: list[str], window: int = 5) -> bool:
    """True if a guard clause (`if ... return|throw`) opens the body.

    Only the first ``window`` lines are inspected.
    """
    for line in lines[:window]:
        trimmed = line.strip()
        if trimmed.startswith("if") and ("return" in trimmed or "throw" in trimmed):
            return True
    return False


def has_any_type(code: str) -> bool:
    return _ANY_TYPE.search(code) is not None


def extract_parameters(signature: str) -> list[Param]:
    """Split the first parenthesized list of ``signature`` into parameters.

    Commas are split naively, so destructured or generic parameters that
    contain commas come back as several entries.
    """
    match = _PARAM_LIST.search(signature)
    if not match:
        return []

    segments = [s.strip() for s in match.group(1).split(",")]
    params: list[Param] = []
    for segment in segments:
        if not segment:
            continue
        name_and_type = segment.split(":")[0].strip()
        name = name_and_type.split("=")[0].strip()
        params.append(Param(name=name or "param"))
    return params
