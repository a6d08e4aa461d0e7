"""Tests for the formatters package."""

import json
from pathlib import Path

import pytest

from quality_gates.analysis.engine import analyze
from quality_gates.analysis.project import FileFailure, FileResult, ProjectSummary
from quality_gates.formatters import (
    GithubFormatter,
    JsonFormatter,
    ReportContext,
    RichFormatter,
    get_formatter,
)
from quality_gates.models import QualityReport

DIRTY = "const x: any = 1;\nconst timeout = 5000;\n"


def _summary(*sources: str) -> ProjectSummary:
    return ProjectSummary(
        results=[FileResult(Path(f"src/file{i}.ts"), analyze(s)) for i, s in enumerate(sources)]
    )


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("rich"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("github"), GithubFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_single_file_record(self):
        data = json.loads(JsonFormatter().format(_summary(DIRTY), ReportContext()))
        assert data["path"] == str(Path("src/file0.ts"))
        assert data["totalLines"] == 3
        assert data["score"] == 93
        assert [v["rule"] for v in data["violations"]] == ["any-type", "magic-numbers"]
        assert data["violations"][0] == {
            "line": 1,
            "rule": "any-type",
            "severity": "error",
            "message": 'Using "any" type is prohibited',
        }

    def test_project_summary(self):
        context = ReportContext(detailed=False)
        data = json.loads(JsonFormatter().format(_summary("", DIRTY), context))
        assert data["filesAnalyzed"] == 2
        assert data["averageScore"] == pytest.approx(96.5)
        assert len(data["files"]) == 2

    def test_function_record_keys(self):
        source = "function f(a: number) {\n  return a;\n}\n"
        data = json.loads(JsonFormatter().format(_summary(source), ReportContext()))
        assert data["functions"] == [
            {
                "name": "f",
                "startLine": 1,
                "lines": 3,
                "complexity": 1,
                "hasEarlyValidation": False,
                "hasAnyType": False,
                "hasMagicNumber": False,
                "params": [{"name": "a", "type": "unknown"}],
            }
        ]


class TestGithubFormatter:
    def test_annotations(self):
        output = GithubFormatter().format(_summary(DIRTY), ReportContext())
        path = Path("src/file0.ts")
        assert output.splitlines() == [
            f'::error file={path},line=1::Using "any" type is prohibited (any-type)',
            f'::warning file={path},line=2::Magic number "5000" should be replaced '
            "with named constant (magic-numbers)",
        ]

    def test_failures_annotated(self):
        summary = ProjectSummary(failures=[FileFailure(Path("x.ts"), "denied")])
        assert GithubFormatter().format(summary, ReportContext()) == "::error file=x.ts::denied"

    def test_clean_is_empty(self):
        assert GithubFormatter().format(_summary(""), ReportContext()) == ""


class TestRichFormatter:
    def test_file_detail_pass(self):
        text = RichFormatter().format(_summary("const LIMIT = 10;\n"), ReportContext())
        assert "100/100" in text
        assert "PASS" in text

    def test_file_detail_fail(self):
        source = "console.log(1);\n" * 5
        text = RichFormatter().format(_summary(source), ReportContext(min_score=80))
        assert "75/100" in text
        assert "Critical Issues:" in text
        assert "FAIL" in text

    def test_function_issues_table(self):
        body = "  x.push(x);\n" * 20
        source = f"function build(x) {{\n{body}}}\n"
        text = RichFormatter().format(_summary(source), ReportContext())
        assert "Function Issues" in text
        assert "build()" in text
        assert "no early validation" in text
        assert "Split large functions" in text

    def test_project_overview(self):
        context = ReportContext(detailed=False)
        text = RichFormatter().format(_summary("", DIRTY), context)
        assert "Project Quality Summary" in text
        assert "Files Needing Attention" in text
        assert "PASS" in text

    def test_average_keeps_one_decimal(self):
        """79.7 must not round up to a passing-looking 80."""
        summary = ProjectSummary(
            results=[
                FileResult(Path(name), QualityReport(1, (), (), score))
                for name, score in (("a.ts", 75), ("b.ts", 85), ("c.ts", 79))
            ]
        )
        text = RichFormatter().format(summary, ReportContext(min_score=80, detailed=False))
        assert "79.7/100" in text
        assert "80/100" not in text
        assert "FAIL" in text

    def test_empty_project(self):
        text = RichFormatter().format(ProjectSummary(), ReportContext(detailed=False))
        assert "No source files found." in text
