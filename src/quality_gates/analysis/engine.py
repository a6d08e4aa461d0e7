"""Analysis engine: turns one source unit into a QualityReport.

The engine never raises for string input. Malformed structure only degrades
what the extractors recover; the report is always complete.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional, Union

from ..config import DEFAULT_CONFIG, GateConfig
from ..logging_config import get_logger
from ..models import FunctionRecord, QualityReport, SourceUnit, Violation
from ..scanning.functions import extract_functions
from ..scanning.patterns import scan_forbidden_patterns, scan_magic_numbers

logger = get_logger(__name__)

BASE_SCORE = 100
ERROR_DEDUCTION = 5
WARNING_DEDUCTION = 2


def analyze(
    source: Union[str, SourceUnit], config: Optional[GateConfig] = None
) -> QualityReport:
    """Analyze source text and return its quality report.

    Args:
        source: Raw source text, or an already wrapped SourceUnit
        config: Thresholds and rule tables (defaults to DEFAULT_CONFIG)

    Returns:
        QualityReport with functions and violations in discovery order

    Example:
        >>> report = analyze("const x: any = 1;\\n")
        >>> [v.rule for v in report.violations]
        ['any-type']
    """
    config = config or DEFAULT_CONFIG
    unit = source if isinstance(source, SourceUnit) else SourceUnit(source)
    total_lines = unit.total_lines

    violations: list[Violation] = []
    violations.extend(scan_forbidden_patterns(unit, config.forbidden_patterns))
    violations.extend(scan_magic_numbers(unit, config.magic_number_allow_list))

    functions = extract_functions(unit, config)
    for function in functions:
        violations.extend(check_function(function, config))

    violations.extend(check_file(total_lines, config))

    score = calculate_score(violations)
    logger.debug(
        f"Analyzed {total_lines} lines: {len(functions)} functions, "
        f"{len(violations)} violations, score {score}"
    )

    return QualityReport(
        total_lines=total_lines,
        functions=tuple(functions),
        violations=tuple(violations),
        score=score,
    )


def check_function(function: FunctionRecord, config: GateConfig) -> list[Violation]:
    """Threshold checks for one function, reported at its header line."""
    violations: list[Violation] = []
    line = function.start_line
    name = function.name

    if function.line_count > config.max_lines_per_function:
        violations.append(
            Violation(
                line=line,
                rule="max-lines-per-function",
                severity="error",
                message=(
                    f'Function "{name}" too long: {function.line_count} lines '
                    f"(max: {config.max_lines_per_function})"
                ),
            )
        )

    if function.complexity > config.max_complexity:
        violations.append(
            Violation(
                line=line,
                rule="complexity",
                severity="error",
                message=(
                    f'Function "{name}" too complex: {function.complexity} '
                    f"(max: {config.max_complexity})"
                ),
            )
        )

    if len(function.params) > config.max_params:
        violations.append(
            Violation(
                line=line,
                rule="max-params",
                severity="error",
                message=(
                    f'Function "{name}" has too many parameters: {len(function.params)} '
                    f"(max: {config.max_params})"
                ),
            )
        )

    if not function.has_early_validation and function.line_count > config.early_validation_min_lines:
        violations.append(
            Violation(
                line=line,
                rule="early-validation",
                severity="warning",
                message=(
                    f'Function "{name}" lacks early validation '
                    f"(should be in first {config.early_validation_window} lines)"
                ),
            )
        )

    return violations


def check_file(total_lines: int, config: GateConfig) -> list[Violation]:
    """File-length check, reported at the last line."""
    if total_lines <= config.max_file_lines:
        return []
    return [
        Violation(
            line=total_lines,
            rule="max-lines",
            severity="warning",
            message=f"File too long: {total_lines} lines (max: {config.max_file_lines})",
        )
    ]


def calculate_score(violations: Iterable[Violation]) -> int:
    """100 minus 5 per error and 2 per warning, clamped to [0, 100]."""
    errors = 0
    warnings = 0
    for violation in violations:
        if violation.severity == "error":
            errors += 1
        else:
            warnings += 1
    score = BASE_SCORE - errors * ERROR_DEDUCTION - warnings * WARNING_DEDUCTION
    return max(0, min(BASE_SCORE, score))
