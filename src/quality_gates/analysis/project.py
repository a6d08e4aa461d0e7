"""Multi-file analysis: discover sources, analyze each, summarize.

Each file is analyzed independently with the same immutable config, so the
work is spread over a thread pool without any locking.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..config import DEFAULT_CONFIG, GateConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import QualityReport
from .engine import analyze

logger = get_logger(__name__)

DEFAULT_PATTERNS: tuple[str, ...] = ("**/*.ts",)
DEFAULT_EXCLUDES: tuple[str, ...] = ("node_modules", "dist")
DEFAULT_WORST_COUNT = 5


@dataclass(frozen=True)
class FileResult:
    """Report for one analyzed file."""

    path: Path
    report: QualityReport

    def to_dict(self) -> dict:
        return {"path": str(self.path), **self.report.to_dict()}


@dataclass(frozen=True)
class FileFailure:
    """A file that could not be read."""

    path: Path
    reason: str


@dataclass
class ProjectSummary:
    """Aggregate of many per-file reports."""

    results: list[FileResult] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)

    @property
    def average_score(self) -> Optional[float]:
        """Mean score over analyzed files, None when nothing was analyzed."""
        if not self.results:
            return None
        return sum(r.report.score for r in self.results) / len(self.results)

    def worst(self, n: int = DEFAULT_WORST_COUNT) -> list[FileResult]:
        """Lowest-scoring files first (ties keep discovery order)."""
        return sorted(self.results, key=lambda r: r.report.score)[:n]

    def passed(self, min_score: float) -> bool:
        average = self.average_score
        return average is None or average >= min_score

    def to_dict(self) -> dict:
        return {
            "filesAnalyzed": len(self.results),
            "averageScore": self.average_score,
            "files": [r.to_dict() for r in self.results],
            "failures": [{"path": str(f.path), "reason": f.reason} for f in self.failures],
        }


def discover_files(
    root: Path,
    patterns: Sequence[str] = DEFAULT_PATTERNS,
    exclude: Sequence[str] = DEFAULT_EXCLUDES,
) -> list[Path]:
    """Glob ``patterns`` under ``root``, skipping excluded path segments."""
    found: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            rel = str(path.relative_to(root))
            if any(marker in rel for marker in exclude):
                continue
            found.add(path)
    return sorted(found)


def read_source(path: Path) -> str:
    """Read a source file as text.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(path, f"Cannot read file: {e}")


def analyze_file(path: Path, config: Optional[GateConfig] = None) -> FileResult:
    """Read and analyze one file."""
    content = read_source(path)
    logger.debug(f"Analyzing {path}")
    return FileResult(path=path, report=analyze(content, config or DEFAULT_CONFIG))


def analyze_project(
    paths: Iterable[Path],
    config: Optional[GateConfig] = None,
    workers: Optional[int] = None,
) -> ProjectSummary:
    """Analyze many files; unreadable files are recorded, not fatal.

    Args:
        paths: Files to analyze, in reporting order
        config: Shared configuration for every file
        workers: Thread pool size; ``None`` or 1 runs sequentially

    Returns:
        ProjectSummary with results in input order
    """
    config = config or DEFAULT_CONFIG
    paths = list(paths)
    summary = ProjectSummary()

    def _run(path: Path) -> FileResult | FileFailure:
        try:
            return analyze_file(path, config)
        except FileAccessError as e:
            logger.warning(f"Skipping {path}: {e.reason}")
            return FileFailure(path=path, reason=e.reason)

    if workers is None or workers <= 1 or len(paths) < 2:
        outcomes = [_run(p) for p in paths]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(_run, paths))

    for outcome in outcomes:
        if isinstance(outcome, FileResult):
            summary.results.append(outcome)
        else:
            summary.failures.append(outcome)

    return summary
