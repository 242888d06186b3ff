"""Integration tests for the carcass CLI.

These tests verify the commands work end-to-end, including:
- Generating design documents from template parameters
- Analyzing, validating and exporting design files
- Exit codes for errors and collisions
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from carcass.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "designs"

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_prints_document(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["schemaVersion"] == "1.1"
        assert data["name"] == "Cabinet 600×720×560"
        assert [p["id"] for p in data["parts"]][:5] == [
            "left",
            "right",
            "top",
            "bottom",
            "back",
        ]
        assert data["cabinetPosition"] == {"x": 200.0, "y": 0.0, "z": 200.0}

    def test_compartments_and_shelves(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "-w", "800", "-c", "2", "-s", "2"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["parts"]) == 12
        divider = next(p for p in data["parts"] if p["id"] == "divider-1")
        assert divider["isShared"] is True

    def test_separate_walls(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["generate", "-w", "800", "-c", "2", "--separate-walls"]
        )
        data = json.loads(result.stdout)
        divider = next(p for p in data["parts"] if p["id"] == "divider-1")
        assert divider["isShared"] is False

    def test_writes_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "designs" / "base.json"
        result = runner.invoke(app, ["generate", "--output", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert "Generated 'Cabinet 600×720×560'" in result.output
        assert "7 parts, 2 spaces, 18 connectors" in result.output

    def test_invalid_dimensions(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["generate", "--width", "20"])
        assert result.exit_code == 1
        assert "Error: Width must exceed two panel thicknesses" in result.output

    def test_generated_file_validates(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "base.json"
        runner.invoke(app, ["generate", "-o", str(output)])
        result = runner.invoke(app, ["validate", str(output)])
        assert result.exit_code == 0
        assert "Validation passed. 7 parts, no collisions." in result.output


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_summary(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["analyze", str(FIXTURES_PATH / "valid_cabinet.json")])
        assert result.exit_code == 0
        assert "Design: Kitchen Base" in result.output
        assert "Parts: 7" in result.output
        assert "Spaces: 2" in result.output
        assert "Connectors: 18" in result.output
        assert "Collisions: 0" in result.output

    def test_spacing_override(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["analyze", str(FIXTURES_PATH / "valid_cabinet.json"), "--spacing", "100"],
        )
        assert result.exit_code == 0
        assert "Connectors: 30" in result.output

    def test_invalid_spacing(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["analyze", str(FIXTURES_PATH / "valid_cabinet.json"), "--spacing", "0"],
        )
        assert result.exit_code == 1
        assert "spacing must be positive" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["analyze", str(FIXTURES_PATH / "valid_cabinet.json"), "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["summary"]["boreholes"] == 36
        assert len(data["spaces"]) == 2

    def test_collisions_exit_code(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["analyze", str(FIXTURES_PATH / "colliding_shelf.json")]
        )
        assert result.exit_code == 2
        assert '! left: Colliding with "Shelf" (overlap: 18×18×540mm)' in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Design file not found" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_design(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_cabinet.json")])
        assert result.exit_code == 0
        assert "Validation passed. 7 parts, no collisions." in result.output

    def test_collisions_are_warnings(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "colliding_shelf.json")]
        )
        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Validation passed with 1 collision(s) between parts" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_schema_errors(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_schema.json")]
        )
        assert result.exit_code == 1
        assert "parts[0].w" in result.output
        assert "parts[1].type" in result.output


class TestExportCommand:
    """Tests for the export command."""

    def test_export_all(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "valid_cabinet.json"),
                "--output-dir",
                str(tmp_path),
                "--project-name",
                "kitchen",
            ],
        )
        assert result.exit_code == 0
        assert (tmp_path / "kitchen_json.json").exists()
        assert (tmp_path / "kitchen_drill.csv").exists()
        assert "drill:" in result.output

    def test_single_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "valid_cabinet.json"),
                "-f",
                "drill",
                "--output-dir",
                str(tmp_path),
            ],
        )
        assert result.exit_code == 0
        assert (tmp_path / "cabinet_drill.csv").exists()
        assert not (tmp_path / "cabinet_json.json").exists()

    def test_unknown_format(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "export",
                str(FIXTURES_PATH / "valid_cabinet.json"),
                "-f",
                "stl",
                "--output-dir",
                str(tmp_path),
            ],
        )
        assert result.exit_code == 1
        assert "Unknown formats: stl" in result.output
