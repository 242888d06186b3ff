"""Unit tests for design document loading and validation.

These tests verify:
- Valid documents load from files and dictionaries
- File, JSON syntax and schema errors are reported as ConfigError
- Validation errors carry JSON paths
- Editor payload wrappers are unwrapped
"""

import json
from pathlib import Path

import pytest

from carcass.application.config import (
    ConfigError,
    DesignDocument,
    PartConfig,
    design_to_json,
    load_design,
    load_design_from_dict,
    load_template_from_dict,
)
from carcass.domain import PartType

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "designs"


def _part(part_id: str = "left", **overrides) -> dict:
    data = {"id": part_id, "type": "leftPanel", "w": 18, "h": 720, "d": 560}
    data.update(overrides)
    return data


class TestLoadDesign:
    """Tests for load_design."""

    def test_valid_file(self) -> None:
        document = load_design(FIXTURES_PATH / "valid_cabinet.json")
        assert document.name == "Kitchen Base"
        assert len(document.parts) == 7
        assert document.parts[6].type is PartType.DOOR
        assert document.parts[6].open_angle == 0
        assert document.cabinet_position.x == 200

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_design(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path
        assert str(exc_info.value) == f"Design file not found: {path}"

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design(FIXTURES_PATH / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] >= 1
        assert "Invalid JSON" in error.message

    def test_schema_errors_have_paths(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design(FIXTURES_PATH / "invalid_schema.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path == FIXTURES_PATH / "invalid_schema.json"
        paths = {d["path"] for d in error.details}
        assert "parts[0].w" in paths
        assert "parts[1].type" in paths
        assert error.message.startswith("Design validation failed:")


class TestLoadDesignFromDict:
    """Tests for load_design_from_dict."""

    def test_minimal_document(self) -> None:
        document = load_design_from_dict({"parts": [_part()]})
        assert document.schema_version == "1.1"
        assert document.name == "New Cabinet Design"
        assert document.pattern is None

    def test_snake_case_accepted(self) -> None:
        document = load_design_from_dict(
            {"schema_version": "1.0", "parts": [_part(open_angle=15)]}
        )
        assert document.parts[0].open_angle == 15

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design_from_dict({"parts": [_part(colour="red")]})
        assert exc_info.value.details[0]["path"] == "parts[0].colour"

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design_from_dict({"schemaVersion": "2.0"})
        assert "Unsupported schema version" in exc_info.value.message

    def test_newer_minor_version_accepted(self) -> None:
        assert load_design_from_dict({"schemaVersion": "1.7"}).schema_version == "1.7"

    def test_duplicate_part_ids(self) -> None:
        with pytest.raises(ConfigError, match="Duplicate part ids: left"):
            load_design_from_dict({"parts": [_part(), _part()]})

    def test_modeldata_wrapper(self) -> None:
        document = load_design_from_dict(
            {"name": "Wrapped", "version": 3, "modelData": {"parts": [_part()]}}
        )
        assert document.name == "Wrapped"
        assert len(document.parts) == 1

    def test_pattern_validation(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_design_from_dict({"pattern": {"spacing": 0}})
        assert exc_info.value.details[0]["path"] == "pattern.spacing"

    def test_space_part_size_must_be_positive(self) -> None:
        space_part = {
            "id": "space-part-1",
            "spaceId": "space-1",
            "typeId": "drawer",
            "width": 500,
            "height": 0,
            "depth": 500,
            "maxWidth": 500,
            "maxHeight": 200,
            "maxDepth": 500,
        }
        with pytest.raises(ConfigError):
            load_design_from_dict({"spaceParts": [space_part]})

    def test_connector_offsets(self) -> None:
        document = load_design_from_dict(
            {"connectorOffsets": {"verbinder-left-top-r-0": {"x": 3, "y": -1}}}
        )
        assert document.connector_offsets["verbinder-left-top-r-0"].y == -1


class TestLoadTemplate:
    def test_defaults(self) -> None:
        template = load_template_from_dict({})
        assert (template.width, template.compartments, template.shelves) == (
            600,
            1,
            1,
        )
        assert template.share_walls

    def test_camel_case(self) -> None:
        assert not load_template_from_dict({"shareWalls": False}).share_walls

    def test_out_of_range(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_template_from_dict({"compartments": 0})
        assert exc_info.value.details[0]["path"] == "compartments"


class TestDesignToJson:
    def test_camel_case_keys(self) -> None:
        document = DesignDocument(
            parts=[
                PartConfig(
                    id="left", type=PartType.LEFT_PANEL, w=18, h=720, d=560, open_angle=5
                )
            ]
        )
        data = json.loads(design_to_json(document))
        assert data["schemaVersion"] == "1.1"
        assert data["parts"][0]["openAngle"] == 5
        assert "isShared" not in data["parts"][0]
        assert "room" not in data
