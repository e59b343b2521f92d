"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Clean configuration files pass validation
- Unreadable or malformed files produce errors
- Normalizer repairs are reported as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from seating.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"
CATALOG_PATH = FIXTURES_PATH / "catalog.json"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_clean_config_with_catalog(self, runner: CliRunner) -> None:
        """A clean configuration priced by the catalog passes with exit code 0."""
        config_path = FIXTURES_PATH / "standard_two_seater.json"
        result = runner.invoke(app, ["validate", str(config_path), "--catalog", str(CATALOG_PATH)])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_full_u_shape(self, runner: CliRunner) -> None:
        """Consoles, accessories and recliners that fit produce no warnings."""
        config_path = FIXTURES_PATH / "u_shape.json"
        result = runner.invoke(app, ["validate", str(config_path), "-c", str(CATALOG_PATH)])

        assert result.exit_code == 0

    def test_missing_base_price_warns(self, runner: CliRunner) -> None:
        """Without a catalog there is no base price, which is a warning."""
        config_path = FIXTURES_PATH / "standard_two_seater.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "base_price" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_repairs_reported(self, runner: CliRunner) -> None:
        """Every repair of a messy configuration is listed by path."""
        config_path = FIXTURES_PATH / "messy_l_shape.json"
        result = runner.invoke(app, ["validate", str(config_path), "-c", str(CATALOG_PATH)])

        assert result.exit_code == 2
        assert "sections.R2" in result.output
        assert "console.placements[1]" in result.output
        assert "console.placements[2]" in result.output
        assert "lounger.numberOfLoungers" in result.output
        assert "lounger.placement" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()
        assert "Validation failed" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        config_path = FIXTURES_PATH / "invalid_json.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "Line 3" in result.output
        assert "Validation failed" in result.output

    def test_schema_error(self, runner: CliRunner) -> None:
        """A sections list instead of a map is a blocking error."""
        config_path = FIXTURES_PATH / "schema_error.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "sections" in result.output

    def test_bad_catalog_value(self, runner: CliRunner, tmp_path: Path) -> None:
        """An unreadable catalog value falls back to its default and is reported."""
        catalog_path = tmp_path / "catalog.json"
        catalog_path.write_text('{"prices": {"base_price": -5}}')
        config_path = FIXTURES_PATH / "standard_two_seater.json"
        result = runner.invoke(app, ["validate", str(config_path), "-c", str(catalog_path)])

        assert result.exit_code == 2
        assert "Catalog (1)" in result.output
        assert "prices.base_price: Unreadable catalog value" in result.output

    def test_catalog_not_an_object(self, runner: CliRunner, tmp_path: Path) -> None:
        """A catalog document that is not an object stops validation."""
        catalog_path = tmp_path / "catalog.json"
        catalog_path.write_text("[1, 2]")
        config_path = FIXTURES_PATH / "standard_two_seater.json"
        result = runner.invoke(app, ["validate", str(config_path), "-c", str(catalog_path)])

        assert result.exit_code == 1
        assert "Validation failed." in result.output

    def test_warnings_grouped(self, runner: CliRunner) -> None:
        """Repairs are listed under a heading per part of the sofa."""
        config_path = FIXTURES_PATH / "messy_l_shape.json"
        result = runner.invoke(app, ["validate", str(config_path), "-c", str(CATALOG_PATH)])

        output = result.output
        assert "  Sections (" in output
        assert "  Console (" in output
        assert "  Lounger (" in output
        assert output.index("  Sections (") < output.index("    sections.R2")
        assert output.index("  Console (") < output.index("    console.placements[1]")

    def test_strict_fails_on_warnings(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "standard_two_seater.json"
        result = runner.invoke(app, ["validate", str(config_path), "--strict"])

        assert result.exit_code == 1
        assert "1 warning(s) in strict mode" in result.output

    def test_strict_clean_config(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "standard_two_seater.json"
        result = runner.invoke(
            app, ["validate", str(config_path), "-c", str(CATALOG_PATH), "--strict"]
        )

        assert result.exit_code == 0
