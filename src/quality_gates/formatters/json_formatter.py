"""JSON formatter for quality-gates."""

import json

from ..analysis.project import ProjectSummary
from .base import BaseFormatter, ReportContext


class JsonFormatter(BaseFormatter):
    """Render reports as JSON.

    A single detailed file renders as its bare report record; anything else
    renders as the project summary.
    """

    def render(self, summary: ProjectSummary, context: ReportContext) -> None:
        print(self.format(summary, context))

    def format(self, summary: ProjectSummary, context: ReportContext) -> str:
        if context.detailed and len(summary.results) == 1:
            data = summary.results[0].to_dict()
        else:
            data = summary.to_dict()
        return json.dumps(data, indent=2)
