"""Regex-based function discovery.

Functions are located without a parser: several header patterns run over the
same text, control statements that look like calls are filtered out, and each
body is recovered by balancing braces from the first ``{`` after the header.
Braces inside strings, regex literals and comments count like any other, so
results are approximate by construction.

Supports: TypeScript, JavaScript
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..config import GateConfig
from ..models import FunctionRecord, SourceUnit
from .metrics import (
    calculate_complexity,
    extract_parameters,
    has_any_type,
    has_early_validation,
)
from .patterns import find_magic_numbers


class HeaderKind(Enum):
    """Which header pattern produced a candidate."""

    DECLARATION = "declaration"
    ARROW = "arrow"
    FUNCTION_EXPRESSION = "function_expression"
    METHOD = "method"


# Run in this order; discovery order follows it.
HEADER_PATTERNS: tuple[tuple[HeaderKind, re.Pattern[str]], ...] = (
    (
        HeaderKind.DECLARATION,
        re.compile(r"(?:export\s+)?(?:async\s+)?function\s+(\w+)\s*\([^)]*\)(?:\s*:\s*[^{]*)?\s*\{"),
    ),
    (
        HeaderKind.ARROW,
        re.compile(r"(?:export\s+)?(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?\([^)]*\)\s*=>\s*\{"),
    ),
    (
        HeaderKind.FUNCTION_EXPRESSION,
        re.compile(
            r"(?:export\s+)?(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?function\s*\([^)]*\)\s*\{"
        ),
    ),
    # Class methods: name(...): ReturnType {
    (HeaderKind.METHOD, re.compile(r"\b(\w+)\s*\([^)]*\)\s*:\s*[^{]*\{")),
)

# `if (x): ...{` and friends match the method pattern
CONTROL_KEYWORDS = frozenset({"if", "for", "while"})


@dataclass(frozen=True)
class HeaderCandidate:
    """A function-like header found in the text."""

    kind: HeaderKind
    name: str
    start: int
    header: str


def find_headers(text: str) -> list[HeaderCandidate]:
    """Run every header pattern and drop control-keyword matches."""
    candidates: list[HeaderCandidate] = []
    for kind, pattern in HEADER_PATTERNS:
        for match in pattern.finditer(text):
            candidates.append(
                HeaderCandidate(
                    kind=kind, name=match.group(1), start=match.start(), header=match.group(0)
                )
            )
    return [c for c in candidates if c.name and c.name not in CONTROL_KEYWORDS]


def extract_body(text: str, start: int) -> tuple[int, str]:
    """Recover the brace-delimited body that follows ``start``.

    Returns:
        ``(offset of the opening brace, body text including both braces)``.
        An unterminated body runs to the end of the text; with no opening
        brace at all the result is ``(-1, "")``.
    """
    first_brace = text.find("{", start)
    if first_brace == -1:
        return -1, ""

    depth = 1
    end = first_brace + 1
    while end < len(text) and depth > 0:
        char = text[end]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        end += 1

    return first_brace, text[first_brace:end]


def extract_functions(unit: SourceUnit, config: GateConfig) -> list[FunctionRecord]:
    """Build one FunctionRecord per recovered function span.

    A declaration with a return type matches both the declaration and the
    method pattern; both resolve to the same opening brace and only the
    first is kept.
    """
    records: list[FunctionRecord] = []
    seen_bodies: set[int] = set()

    for candidate in find_headers(unit.text):
        brace, body = extract_body(unit.text, candidate.start)
        if brace in seen_bodies:
            continue
        seen_bodies.add(brace)

        body_lines = body.split("\n")
        records.append(
            FunctionRecord(
                name=candidate.name,
                start_line=unit.line_at(candidate.start),
                line_count=len(body_lines),
                complexity=calculate_complexity(body),
                has_early_validation=has_early_validation(
                    body_lines, config.early_validation_window
                ),
                has_any_type=has_any_type(body),
                has_magic_number=bool(find_magic_numbers(body, config.magic_number_allow_list)),
                params=tuple(extract_parameters(candidate.header)),
            )
        )

    return records
