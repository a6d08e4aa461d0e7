"""Textual pattern scanning: forbidden constructs and magic numbers.

Both scans run over the raw text with no knowledge of strings or comments, so
``// console.log`` in a comment is reported exactly like a real call.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..config import PatternRule
from ..models import SourceUnit, Violation

# A run of digits not glued to an identifier, optionally negated
MAGIC_NUMBER_PATTERN = re.compile(r"(?<!\w)-?\d+(?!\w)")


def scan_forbidden_patterns(unit: SourceUnit, rules: Iterable[PatternRule]) -> list[Violation]:
    """Report every non-overlapping match of every rule, in rule order."""
    violations: list[Violation] = []
    for rule in rules:
        for match in rule.matcher.finditer(unit.text):
            violations.append(
                Violation(
                    line=unit.line_at(match.start()),
                    rule=rule.kind,
                    severity=rule.severity,
                    message=rule.message,
                )
            )
    return violations


def _canonical(literal: str) -> str:
    """Decimal text of ``literal`` as ``str(int(literal))`` would print it.

    Works on the text so that arbitrarily long digit runs never hit the
    int conversion limit.
    """
    digits = literal.lstrip("-").lstrip("0") or "0"
    if literal.startswith("-") and digits != "0":
        return "-" + digits
    return digits


def find_magic_numbers(text: str, allow_list: Iterable[int]) -> list[tuple[str, int]]:
    """Find integer literals outside the allow-list.

    Returns:
        ``(literal, offset)`` pairs in text order
    """
    allowed = frozenset(str(value) for value in allow_list)
    hits: list[tuple[str, int]] = []
    for match in MAGIC_NUMBER_PATTERN.finditer(text):
        literal = match.group(0)
        if _canonical(literal) in allowed:
            continue
        hits.append((literal, match.start()))
    return hits


def scan_magic_numbers(unit: SourceUnit, allow_list: Iterable[int]) -> list[Violation]:
    """Report each magic number as a ``magic-numbers`` warning."""
    return [
        Violation(
            line=unit.line_at(offset),
            rule="magic-numbers",
            severity="warning",
            message=f'Magic number "{literal}" should be replaced with named constant',
        )
        for literal, offset in find_magic_numbers(unit.text, allow_list)
    ]
