"""Tests for configuration defaults, validation and loading."""

import pytest

from quality_gates.config import (
    DEFAULT_CONFIG,
    DEFAULT_FORBIDDEN_PATTERNS,
    GateConfig,
    PatternRule,
    load_config,
)
from quality_gates.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep project config discovery away from the real working directory."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "QUALITY_GATES_MAX_PARAMS",
        "QUALITY_GATES_MAX_COMPLEXITY",
        "QUALITY_GATES_MAX_FILE_LINES",
    ):
        monkeypatch.delenv(name, raising=False)


class TestGateConfig:
    """Test GateConfig defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.max_lines_per_function == 15
        assert DEFAULT_CONFIG.max_complexity == 5
        assert DEFAULT_CONFIG.max_params == 4
        assert DEFAULT_CONFIG.max_file_lines == 300
        assert DEFAULT_CONFIG.early_validation_window == 5
        assert DEFAULT_CONFIG.early_validation_min_lines == 10
        assert DEFAULT_CONFIG.magic_number_allow_list == (0, 1, -1, 2, 10, 100, 1000)
        assert DEFAULT_CONFIG.forbidden_patterns == DEFAULT_FORBIDDEN_PATTERNS

    def test_default_rule_kinds(self):
        kinds = [rule.kind for rule in DEFAULT_FORBIDDEN_PATTERNS]
        assert kinds == [
            "any-type",
            "console-log",
            "eslint-disable",
            "eslint-disable",
            "ts-ignore",
            "ts-expect-error",
        ]

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_complexity = 10  # type: ignore[misc]

    def test_lists_normalized_to_tuples(self):
        config = GateConfig(magic_number_allow_list=[0, 7])  # type: ignore[arg-type]
        assert config.magic_number_allow_list == (0, 7)
        hash(config)

    @pytest.mark.parametrize(
        "field_name",
        ["max_lines_per_function", "max_complexity", "max_file_lines", "early_validation_window"],
    )
    def test_positive_fields(self, field_name):
        with pytest.raises(ValueError, match=field_name):
            GateConfig(**{field_name: 0})

    def test_zero_params_allowed(self):
        assert GateConfig(max_params=0).max_params == 0

    def test_negative_params_rejected(self):
        with pytest.raises(ValueError):
            GateConfig(max_params=-1)


class TestPatternRule:
    def test_invalid_severity(self):
        with pytest.raises(ValueError, match="severity"):
            PatternRule("x", "x", "fatal", "m")  # type: ignore[arg-type]

    def test_invalid_regex(self):
        with pytest.raises(ValueError, match="regex"):
            PatternRule("x", "(unclosed", "error", "m")

    def test_matcher_compiles_pattern(self):
        rule = PatternRule("todo", r"TODO", "warning", "m")
        assert rule.matcher.search("# TODO later")


class TestLoadConfig:
    """Test load_config merging."""

    def test_no_sources_gives_defaults(self):
        assert load_config() == DEFAULT_CONFIG

    def test_overrides(self):
        config = load_config(max_complexity=9, max_params=None)
        assert config.max_complexity == 9
        assert config.max_params == 4

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "gates.toml"
        path.write_text(
            "max_complexity = 8\n"
            "magic_number_allow_list = [0, 1, 42]\n"
            "\n"
            "[[forbidden_patterns]]\n"
            'kind = "debugger"\n'
            "pattern = '\\bdebugger\\b'\n"
            'severity = "warning"\n'
            'message = "Remove debugger statements"\n'
        )
        config = load_config(config_file=path)
        assert config.max_complexity == 8
        assert config.magic_number_allow_list == (0, 1, 42)
        assert [r.kind for r in config.forbidden_patterns] == ["debugger"]
        assert config.forbidden_patterns[0].matcher.search("debugger;")

    def test_project_file_discovered(self, tmp_path):
        (tmp_path / "quality-gates.toml").write_text("max_params = 6\n")
        assert load_config().max_params == 6

    def test_section_table(self, tmp_path):
        path = tmp_path / "pyproject-like.toml"
        path.write_text("[quality-gates]\nmax_file_lines = 500\n")
        assert load_config(config_file=path).max_file_lines == 500

    def test_overrides_beat_files(self, tmp_path):
        (tmp_path / "quality-gates.toml").write_text("max_params = 6\n")
        assert load_config(max_params=2).max_params == 2

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("QUALITY_GATES_MAX_PARAMS", "7")
        assert load_config().max_params == 7

    def test_invalid_env_var(self, monkeypatch):
        monkeypatch.setenv("QUALITY_GATES_MAX_COMPLEXITY", "lots")
        with pytest.raises(ConfigurationError, match="QUALITY_GATES_MAX_COMPLEXITY"):
            load_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=tmp_path / "missing.toml")

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_params = = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_out_of_range_value(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_complexity = 0\n")
        with pytest.raises(ConfigurationError, match="max_complexity"):
            load_config(config_file=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("max_nesting = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_bad_pattern_entry(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('[[forbidden_patterns]]\nkind = "x"\npattern = "("\n')
        with pytest.raises(ConfigurationError, match="forbidden_patterns"):
            load_config(config_file=path)
