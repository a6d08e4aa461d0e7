"""Regex-driven structure recovery and per-function heuristics."""

from .functions import (
    CONTROL_KEYWORDS,
    HEADER_PATTERNS,
    HeaderCandidate,
    HeaderKind,
    extract_body,
    extract_functions,
    find_headers,
)
from .metrics import (
    calculate_complexity,
    extract_parameters,
    has_any_type,
    has_early_validation,
)
from .patterns import find_magic_numbers, scan_forbidden_patterns, scan_magic_numbers

__all__ = [
    "CONTROL_KEYWORDS",
    "HEADER_PATTERNS",
    "HeaderCandidate",
    "HeaderKind",
    "extract_body",
    "extract_functions",
    "find_headers",
    "calculate_complexity",
    "extract_parameters",
    "has_any_type",
    "has_early_validation",
    "find_magic_numbers",
    "scan_forbidden_patterns",
    "scan_magic_numbers",
]
