"""Integration tests for the templates CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from toterack.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    """Tests for templates list."""

    def test_lists_bundled_templates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "tote-rack-3x3" in result.output
        assert "tote-rack-5x4-wheels" in result.output


class TestTemplatesShow:
    """Tests for templates show."""

    def test_prints_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "show", "tote-rack-3x3"])

        assert result.exit_code == 0
        assert json.loads(result.output)["layout"]["columns"] == 3

    def test_unknown(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "show", "bookshelf"])

        assert result.exit_code == 1
        assert "Template not found" in result.output


class TestTemplatesInit:
    """Tests for templates init."""

    def test_creates_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "garage.json"
        result = runner.invoke(
            app, ["templates", "init", "tote-rack-3x3", "--output", str(output)]
        )

        assert result.exit_code == 0
        assert output.exists()
        assert f"Created: {output}" in result.output

    def test_created_file_quotes(self, runner: CliRunner, tmp_path: Path) -> None:
        """A freshly initialized template can be quoted directly."""
        output = tmp_path / "rack.json"
        runner.invoke(app, ["templates", "init", "tote-rack-5x4-wheels", "-o", str(output)])

        result = runner.invoke(app, ["quote", "--config", str(output), "-f", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["summary"]["profit"] == pytest.approx(274.0)

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "rack.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(app, ["templates", "init", "tote-rack-3x3", "-o", str(output)])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text(encoding="utf-8") == "{}"

    def test_force_overwrites(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "rack.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(
            app, ["templates", "init", "tote-rack-3x3", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["schema_version"] == "1.0"

    def test_unknown_template(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "bookshelf", "-o", str(tmp_path / "x.json")]
        )

        assert result.exit_code == 1
        assert "Available templates" in result.output
