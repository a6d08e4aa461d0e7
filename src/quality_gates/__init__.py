"""
quality-gates - heuristic quality checks for TypeScript/JavaScript sources

Scans raw source text for forbidden constructs, magic numbers and oversized
or overly complex functions, and folds the findings into a 0-100 score.
No parser is involved: structure is recovered with regexes and brace counting.
"""

__version__ = "0.1.0"

from .analysis import analyze
from .config import DEFAULT_CONFIG, GateConfig, PatternRule, load_config
from .models import FunctionRecord, Param, QualityReport, SourceUnit, Violation

__all__ = [
    "analyze",  # Main entry point
    "GateConfig",
    "PatternRule",
    "DEFAULT_CONFIG",
    "load_config",
    "QualityReport",
    "FunctionRecord",
    "Param",
    "SourceUnit",
    "Violation",
]
