"""Configuration loading and management for quality-gates.

The analyzer takes one immutable ``GateConfig`` per call. Sources are merged
in priority order:
    1. Defaults (defined in GateConfig)
    2. Project config (./quality-gates.toml)
    3. Explicit config file
    4. Environment variables (QUALITY_GATES_* prefix)
    5. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(max_complexity=8)
    >>> config.max_complexity
    8
"""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, fields
from functools import cached_property
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigurationError, InvalidConfigError
from .models import SEVERITIES, Severity

PROJECT_CONFIG_NAME = "quality-gates.toml"
ENV_PREFIX = "QUALITY_GATES_"


@dataclass(frozen=True)
class PatternRule:
    """A forbidden construct: any match of ``pattern`` is a finding.

    Attributes:
        kind: Rule identifier reported on each violation
        pattern: Regular expression searched over the raw text
        severity: "error" or "warning"
        message: Message attached to each violation
    """

    kind: str
    pattern: str
    severity: Severity = "error"
    message: str = ""

    def __post_init__(self) -> None:
        if not self.kind:
            raise ValueError("pattern rule kind must not be empty")
        if self.severity not in SEVERITIES:
            raise ValueError(
                f"pattern rule {self.kind!r} has invalid severity {self.severity!r}"
            )
        try:
            re.compile(self.pattern)
        except re.error as e:
            raise ValueError(f"pattern rule {self.kind!r} has invalid regex: {e}")

    @cached_property
    def matcher(self) -> re.Pattern[str]:
        return re.compile(self.pattern)


# `: any` followed by whitespace, `[`, `,`, `;` or end of text
ANY_TYPE_PATTERN = r": any(?:\s|\[|,|;|$)"

DEFAULT_FORBIDDEN_PATTERNS: tuple[PatternRule, ...] = (
    PatternRule("any-type", ANY_TYPE_PATTERN, "error", 'Using "any" type is prohibited'),
    PatternRule(
        "console-log", r"console\.log", "error", "Use proper logging instead of console.log"
    ),
    PatternRule(
        "eslint-disable", r"/\* eslint-disable", "error", "ESLint disable comments are prohibited"
    ),
    PatternRule(
        "eslint-disable", r"// eslint-disable", "error", "ESLint disable comments are prohibited"
    ),
    PatternRule("ts-ignore", r"@ts-ignore", "error", "@ts-ignore comments are prohibited"),
    PatternRule(
        "ts-expect-error", r"@ts-expect-error", "error", "@ts-expect-error should be avoided"
    ),
)

DEFAULT_MAGIC_NUMBER_ALLOW_LIST: tuple[int, ...] = (0, 1, -1, 2, 10, 100, 1000)


@dataclass(frozen=True)
class GateConfig:
    """Thresholds and rule tables for one analysis.

    Attributes:
        Function limits:
            max_lines_per_function: Body lines above this are an error
            max_complexity: Heuristic complexity above this is an error
            max_params: Parameter count above this is an error

        File limits:
            max_file_lines: Total lines above this is a warning

        Early validation:
            early_validation_window: Leading body lines searched for a guard clause
            early_validation_min_lines: Functions longer than this need a guard clause

        Pattern tables:
            magic_number_allow_list: Integer literals never reported as magic numbers
            forbidden_patterns: Rules whose matches are always findings
    """

    max_lines_per_function: int = 15
    max_complexity: int = 5
    max_params: int = 4
    max_file_lines: int = 300

    early_validation_window: int = 5
    early_validation_min_lines: int = 10

    magic_number_allow_list: tuple[int, ...] = DEFAULT_MAGIC_NUMBER_ALLOW_LIST
    forbidden_patterns: tuple[PatternRule, ...] = DEFAULT_FORBIDDEN_PATTERNS

    def __post_init__(self) -> None:
        """Validate configuration."""
        positive_fields = [
            "max_lines_per_function",
            "max_complexity",
            "max_file_lines",
            "early_validation_window",
        ]
        for field_name in positive_fields:
            if getattr(self, field_name) < 1:
                raise ValueError(f"{field_name} must be at least 1")

        if self.max_params < 0:
            raise ValueError("max_params must be non-negative")
        if self.early_validation_min_lines < 0:
            raise ValueError("early_validation_min_lines must be non-negative")

        # Lists from TOML arrive as lists; keep the config hashable and immutable
        object.__setattr__(
            self, "magic_number_allow_list", tuple(int(v) for v in self.magic_number_allow_list)
        )
        object.__setattr__(self, "forbidden_patterns", tuple(self.forbidden_patterns))
        for rule in self.forbidden_patterns:
            if not isinstance(rule, PatternRule):
                raise ValueError(f"forbidden_patterns entries must be PatternRule, got {rule!r}")


# Default configuration (singleton)
DEFAULT_CONFIG = GateConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> GateConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset CLI options fall through

    Returns:
        Validated GateConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    rules = merged.pop("forbidden_patterns", None)
    if rules is not None:
        merged["forbidden_patterns"] = _parse_pattern_rules(rules)

    try:
        return GateConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _parse_pattern_rules(raw: Any) -> tuple[PatternRule, ...]:
    """Build PatternRules from ``[[forbidden_patterns]]`` tables."""
    if not isinstance(raw, (list, tuple)):
        raise ConfigurationError("forbidden_patterns must be an array of tables")

    rules: list[PatternRule] = []
    for entry in raw:
        if isinstance(entry, PatternRule):
            rules.append(entry)
            continue
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Invalid forbidden_patterns entry: {entry!r}")
        try:
            rules.append(PatternRule(**entry))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid forbidden_patterns entry: {e}")
    return tuple(rules)


def _load_env_vars() -> dict[str, Any]:
    """Load integer thresholds from QUALITY_GATES_* environment variables.

    Supported environment variables:
        QUALITY_GATES_MAX_LINES_PER_FUNCTION
        QUALITY_GATES_MAX_COMPLEXITY
        QUALITY_GATES_MAX_PARAMS
        QUALITY_GATES_MAX_FILE_LINES
        QUALITY_GATES_EARLY_VALIDATION_WINDOW
        QUALITY_GATES_EARLY_VALIDATION_MIN_LINES
    """
    result: dict[str, Any] = {}

    for f in fields(GateConfig):
        if f.type not in ("int", int):
            continue
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[f.name] = int(env_value)
        except ValueError:
            raise InvalidConfigError(env_key, env_value, "expected integer")

    return result


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, wrapping parse failures in ConfigurationError."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    # Allow the settings to live under a [quality-gates] table as well
    section = data.get("quality-gates")
    if isinstance(section, dict):
        return dict(section)
    return data
