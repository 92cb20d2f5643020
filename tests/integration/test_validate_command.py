"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Layout and peephole advisories are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from doorpanels.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_minimal.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0
        assert f"Validating {config_path}" in result.output
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_full_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "valid_full.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "invalid_json.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 3" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "unknown_field.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "handle" in result.output

    def test_invalid_values_listed(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "invalid_values.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "door.width" in result.output
        assert "proportion.panel_count" in result.output
        assert "Value: -5" in result.output

    def test_unsupported_version(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "unsupported_version.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "schema_version" in result.output

    def test_overflow_is_a_warning(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "overflow.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "exceed the available height" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with" in result.output

    def test_peephole_conflicts_are_warnings(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "peephole_on_edge.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Panel 1: On panel edge" in result.output
        assert "viewing band" in result.output

    def test_edge_too_wide_is_an_error(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "edge_too_wide.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "spacing.edge_distance" in result.output
        assert "Validation failed: 1 error(s)" in result.output
