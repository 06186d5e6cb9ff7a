"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

import treecalc
from treecalc._version import get_version
from treecalc.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def strict_config(tmp_path: Path) -> Path:
    """Create a treecalc.toml that enables strict parsing."""
    config = tmp_path / "treecalc.toml"
    config.write_text(
        """
[calc]
strict = true
precision = 4
"""
    )
    return config


class TestEvalCommand:
    def test_single_expression(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 * (3 + 4)"])
        assert result.exit_code == 0
        assert result.output == "2 * (3 + 4) = 14\n"

    def test_multiple_expressions(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "13.75 + 22 * 15", "10 - 3 * 2"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["13.75 + 22 * 15 = 343.75", "10 - 3 * 2 = 4"]

    def test_leading_minus_after_separator(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "-(3 + 1) * 2"])
        assert result.exit_code == 0
        assert "-(3 + 1) * 2 = -8" in result.output

    def test_failure_sets_exit_code(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 + 1", "10 / 0", "(1 + 2"])
        assert result.exit_code == 1
        assert result.output.splitlines() == [
            "1 + 1 = 2",
            "Error: Division by zero",
            "Error: Expected ')'",
        ]

    def test_trailing_input_ignored_by_default(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 + 3 garbage"])
        assert result.exit_code == 0
        assert "= 5" in result.output

    def test_strict_flag(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "--strict", "2 + 3 garbage"])
        assert result.exit_code == 1
        assert "Error: Unexpected input after expression: 'garbage'" in result.output

    def test_basic_flag(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "--basic", "10 - 3"])
        assert result.exit_code == 0
        assert result.output == "10 - 3 = 10\n"

    def test_precision(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["eval", "--precision", "3", "1 / 3"])
        assert result.output == "1 / 3 = 0.333\n"

    def test_config_file(self, cli_runner, strict_config: Path) -> None:
        result = cli_runner.invoke(
            app, ["eval", "--config", str(strict_config), "2 / 3", "1 + 2 )"]
        )
        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines[0] == "2 / 3 = 0.6667"
        assert lines[1].startswith("Error: Unexpected input")

    def test_invalid_config_file(self, cli_runner, tmp_path: Path) -> None:
        config = tmp_path / "treecalc.toml"
        config.write_text("[calc]\nprecision = 0\n")
        result = cli_runner.invoke(app, ["eval", "--config", str(config), "1"])
        assert result.exit_code == 1
        assert "Error: Invalid configuration" in result.output

    def test_lenient_overrides_strict_config(self, cli_runner, strict_config: Path) -> None:
        result = cli_runner.invoke(
            app, ["eval", "--lenient", "--config", str(strict_config), "2 + 3 garbage"]
        )
        assert result.exit_code == 0
        assert result.output == "2 + 3 garbage = 5\n"


class TestTreeCommand:
    def test_shows_tree_and_value(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["tree", "1 + 2 * 3"])
        assert result.exit_code == 0
        assert "Tree:  (1 + (2 * 3))" in result.output
        assert "Depth: 3" in result.output
        assert "Value: 7" in result.output

    def test_parse_error_shows_location(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["tree", "(1 + 2"])
        assert result.exit_code == 1
        assert "column 7" in result.output
        assert "^" in result.output
        assert "Expected ')'" in result.output

    def test_division_by_zero(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["tree", "4 / (2 - 2)"])
        assert result.exit_code == 1
        assert "Tree:  (4 / (2 - 2))" in result.output
        assert "Error: Division by zero" in result.output

    def test_lenient_overrides_strict_config(self, cli_runner, strict_config: Path) -> None:
        result = cli_runner.invoke(
            app, ["tree", "--lenient", "--config", str(strict_config), "1 + 2 )"]
        )
        assert result.exit_code == 0
        assert "Value: 3" in result.output

    def test_long_chain(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["tree", " + ".join(["1"] * 5000)])
        assert result.exit_code == 0
        assert "Depth: 5000" in result.output
        assert "Value: 5000" in result.output


class TestDemoCommand:
    def test_runs_all_cases(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "Hand-built trees:" in result.output
        assert "  10 / 2 + 5 = 10" in result.output
        assert "  Error: Division by zero" in result.output
        assert "Parsed expressions:" in result.output
        assert "  -(3 + 1) * 2 = -8" in result.output


class TestGlobalOptions:
    def test_version(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == f"treecalc {get_version()}"

    def test_package_version_matches_metadata(self) -> None:
        assert treecalc.__version__ == get_version()
        assert treecalc.__version__ != ""

    def test_no_args_shows_help(self, cli_runner) -> None:
        result = cli_runner.invoke(app, [])
        assert "eval" in result.output
        assert "demo" in result.output

    def test_verbose(self, cli_runner) -> None:
        result = cli_runner.invoke(app, ["-v", "eval", "1 + 1"])
        assert result.exit_code == 0
        assert "1 + 1 = 2" in result.output
