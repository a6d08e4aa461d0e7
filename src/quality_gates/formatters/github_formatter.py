"""GitHub Actions formatter: one annotation per violation."""

from typing import List

from ..analysis.project import ProjectSummary
from .base import BaseFormatter, ReportContext


class GithubFormatter(BaseFormatter):
    """Output GitHub Actions ``::error`` / ``::warning`` annotations."""

    def render(self, summary: ProjectSummary, context: ReportContext) -> None:
        print(self.format(summary, context))

    def format(self, summary: ProjectSummary, context: ReportContext) -> str:
        lines: List[str] = []
        for result in summary.results:
            for v in result.report.violations:
                lines.append(
                    f"::{v.severity} file={result.path},line={v.line}::{v.message} ({v.rule})"
                )
        for failure in summary.failures:
            lines.append(f"::error file={failure.path}::{failure.reason}")
        return "\n".join(lines)
