"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Advisory warnings are displayed
- Exit codes are correct
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from toterack.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_3x3.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_with_warnings(self, runner: CliRunner) -> None:
        """A layout outside the price table is valid but flagged."""
        config_path = FIXTURES_PATH / "extrapolated_layout.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_unknown_override(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "unknown_override.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "lumber.overrides.Shelves" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "finish" in result.output

    def test_negative_dimension(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "negative_width.json")])

        assert result.exit_code == 1
        assert "container.width" in result.output
        assert "Value: -4" in result.output
