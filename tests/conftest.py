"""Shared test fixtures for quality-gates."""

import pytest

from quality_gates.config import GateConfig


@pytest.fixture
def clean_source():
    """No functions, no forbidden constructs, only allow-listed numbers."""
    return (
        "const LIMIT = 10;\n"
        "export interface User {\n"
        "  name: string;\n"
        "}\n"
    )


@pytest.fixture
def guarded_function():
    """Small typed function with a guard clause on its first body line."""
    return (
        "export function normalize(value: string): string {\n"
        '  if (!value) return "";\n'
        "  return value.trim();\n"
        "}\n"
    )


@pytest.fixture
def branchy_function():
    """Header on line 3; five `if` guards give complexity 6."""
    return (
        "// classifier\n"
        "\n"
        "function classify(n: number): string {\n"
        '  if (n < 0) return "negative";\n'
        '  if (n === 0) return "zero";\n'
        '  if (n === 1) return "one";\n'
        '  if (n === 2) return "two";\n'
        '  if (n === 10) return "ten";\n'
        '  return "many";\n'
        "}\n"
    )


@pytest.fixture
def long_unguarded_function():
    """Twelve lines from brace to brace and no guard clause."""
    return (
        "function build(x: string[], y: string): void {\n"
        + "  x.push(y);\n" * 10
        + "}\n"
    )


@pytest.fixture
def strict_config():
    return GateConfig(max_complexity=5, max_params=4, max_file_lines=300)
