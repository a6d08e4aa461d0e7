"""Base formatter interface for quality-gates output rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..analysis.project import ProjectSummary
from ..config import DEFAULT_CONFIG, GateConfig

DEFAULT_MIN_SCORE = 80.0


@dataclass
class ReportContext:
    """What the formatter needs besides the results themselves.

    Attributes:
        config: Thresholds the reports were produced with
        min_score: Pass/fail threshold shown in the verdict
        detailed: Per-file detail (single file) vs project overview
    """

    config: GateConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    min_score: float = DEFAULT_MIN_SCORE
    detailed: bool = True


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, summary: ProjectSummary, context: ReportContext) -> None:
        """Render results to stdout."""

    @abstractmethod
    def format(self, summary: ProjectSummary, context: ReportContext) -> str:
        """Return formatted string representation of results."""
