"""Unit tests for the exporter framework and exporters.

These tests verify:
- Registry discovery of the built-in formats
- ExportManager file naming
- JSON export structure and rounding
- Drill list rows and face codes
"""

import csv
import io
import json
from pathlib import Path

import pytest

from carcass.application import (
    DesignCommands,
    DesignOutput,
    DesignState,
    assemble_output,
)
from carcass.infrastructure.exporters import (
    DRILL_COLUMNS,
    DrillListExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonDesignExporter,
    output_to_dict,
)


@pytest.fixture
def output(template_state) -> DesignOutput:
    state = DesignCommands().add_space_part(template_state, "space-1", "drawer").state
    return assemble_output(state)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["drill", "json"]
        assert ExporterRegistry.is_registered("json")
        assert not ExporterRegistry.is_registered("dxf")

    def test_get(self) -> None:
        assert ExporterRegistry.get("drill") is DrillListExporter

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'stl'"):
            ExporterRegistry.get("stl")

    def test_exporters_satisfy_protocol(self) -> None:
        assert isinstance(JsonDesignExporter(), Exporter)
        assert isinstance(DrillListExporter(), Exporter)


class TestExportManager:
    def test_export_all(self, output: DesignOutput, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path / "out")
        results = manager.export_all(["json", "drill"], output, "kitchen")
        assert results == {
            "json": tmp_path / "out" / "kitchen_json.json",
            "drill": tmp_path / "out" / "kitchen_drill.csv",
        }
        assert all(path.exists() for path in results.values())

    def test_unknown_format(self, output: DesignOutput, tmp_path: Path) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["stl"], output)


class TestJsonExport:
    """Tests for output_to_dict and JsonDesignExporter."""

    def test_structure(self, output: DesignOutput) -> None:
        data = output_to_dict(output)
        assert set(data) == {
            "schema_version",
            "summary",
            "parts",
            "spaces",
            "connectors",
            "boreholes",
            "collisions",
        }
        assert data["summary"]["connectors"] == 18
        assert len(data["boreholes"]) == 40

    def test_part_entries(self, output: DesignOutput) -> None:
        left = output_to_dict(output)["parts"][0]
        assert left["id"] == "left"
        assert left["part_type"] == "leftPanel"
        assert left["name"] == "Left Panel"
        assert left["holes"][0]["face"] == "front"
        assert left["holes"][0]["kind"] == "verbinder"

    def test_connector_type(self, output: DesignOutput) -> None:
        connector = output_to_dict(output)["connectors"][0]
        assert connector["type"] == "vertical-horizontal-right"
        assert connector["side"] == "right"

    def test_rounding(self, two_compartment_cabinet) -> None:
        state = DesignState.from_parts(tuple(two_compartment_cabinet))
        data = output_to_dict(assemble_output(state))
        for part in data["parts"]:
            for key in ("x", "y", "z", "w", "h", "d"):
                value = part[key]
                assert value == round(value, 1)

    def test_export_string_is_json(self, output: DesignOutput) -> None:
        text = JsonDesignExporter(indent=None).export_string(output)
        assert json.loads(text)["summary"]["parts"] == 7


class TestDrillListExport:
    """Tests for DrillListExporter."""

    def _rows(self, output: DesignOutput) -> list[dict[str, str]]:
        text = DrillListExporter().export_string(output)
        return list(csv.DictReader(io.StringIO(text)))

    def test_header(self, output: DesignOutput) -> None:
        text = DrillListExporter().export_string(output)
        assert text.splitlines()[0] == ",".join(DRILL_COLUMNS)

    def test_one_row_per_part_hole(self, output: DesignOutput) -> None:
        expected = sum(len(entry.holes) for entry in output.parts_with_holes)
        assert len(self._rows(output)) == expected

    def test_connector_row(self, output: DesignOutput) -> None:
        row = self._rows(output)[0]
        assert row["part_id"] == "left"
        assert row["hole_id"] == "verbinder-left-top-r-0-front"
        assert row["face_code"] == "1"
        assert (row["x"], row["y"]) == ("32.0", "711.0")
        assert (row["diameter"], row["depth"]) == ("8.0", "12.0")

    def test_side_holes_use_edge_code(self, output: DesignOutput) -> None:
        side_rows = [r for r in self._rows(output) if r["face"] == "side"]
        assert side_rows
        assert {r["face_code"] for r in side_rows} == {"2"}

    def test_hardware_rows(self, output: DesignOutput) -> None:
        rows = [r for r in self._rows(output) if r["kind"] == "borehole"]
        assert rows
        assert {r["diameter"] for r in rows} == {"5.0"}
