"""Single-file analysis engine and multi-file aggregation."""

from .engine import analyze, calculate_score
from .project import (
    FileFailure,
    FileResult,
    ProjectSummary,
    analyze_file,
    analyze_project,
    discover_files,
    read_source,
)

__all__ = [
    "analyze",
    "calculate_score",
    "FileFailure",
    "FileResult",
    "ProjectSummary",
    "analyze_file",
    "analyze_project",
    "discover_files",
    "read_source",
]
