"""Unit tests for connector placement at panel junctions.

These tests verify:
- Connector counts and depth positions along a joint
- Junction detection on both sides of a vertical panel
- Connector ids, positions and hole specs
"""

import pytest

from carcass.application import DesignState
from carcass.domain import (
    ConnectorPattern,
    ConnectorPlacer,
    HoleFace,
    JunctionSide,
    Part,
    PartType,
    Tolerances,
    connector_count,
    connector_depths,
    connector_id,
)


class TestConnectorCount:
    """Tests for connector_count and connector_depths."""

    def test_default_joint(self) -> None:
        # (554 - 64) / 200 = 2.45 -> 3 connectors
        assert connector_count(554, ConnectorPattern()) == 3

    def test_short_joint_has_minimum_two(self) -> None:
        assert connector_count(50, ConnectorPattern()) == 2
        assert connector_count(100, ConnectorPattern(spacing=1000)) == 2

    @pytest.mark.parametrize("spacing", [50, 100, 150, 200, 400])
    def test_smaller_spacing_never_fewer(self, spacing: float) -> None:
        wider = connector_count(554, ConnectorPattern(spacing=spacing * 2))
        assert connector_count(554, ConnectorPattern(spacing=spacing)) >= wider

    @pytest.mark.parametrize("edge_offset", [0, 16, 32, 64, 150, 250])
    @pytest.mark.parametrize("depth", [100, 300, 554, 1200])
    def test_smaller_edge_offset_never_fewer(
        self, edge_offset: float, depth: float
    ) -> None:
        larger = connector_count(depth, ConnectorPattern(edge_offset=edge_offset + 20))
        assert connector_count(depth, ConnectorPattern(edge_offset=edge_offset)) >= larger

    def test_edge_offset_changes_count(self) -> None:
        # floor(554 / 200) + 1 = 3, while (554 - 400) / 200 leaves only the minimum
        assert connector_count(554, ConnectorPattern(edge_offset=0)) == 3
        assert connector_count(554, ConnectorPattern(edge_offset=200)) == 2

    def test_depths_span_edge_offsets(self) -> None:
        depths = connector_depths(0, 554, ConnectorPattern())
        assert depths == pytest.approx([32, 277, 522])

    def test_depths_start_at_joint_origin(self) -> None:
        depths = connector_depths(10, 540, ConnectorPattern())
        assert depths[0] == 42
        assert depths[-1] == pytest.approx(518)

    def test_id_format(self) -> None:
        assert (
            connector_id("left", "top", JunctionSide.RIGHT, 0)
            == "verbinder-left-top-r-0"
        )


class TestJunctionSides:
    @pytest.fixture
    def placer(self) -> ConnectorPlacer:
        return ConnectorPlacer()

    def test_right_junction(self, placer: ConnectorPlacer) -> None:
        left = Part("left", PartType.LEFT_PANEL, 0, 0, 0, 18, 720, 554)
        top = Part("top", PartType.TOP_PANEL, 18, 702, 0, 564, 18, 554)
        assert placer.junction_sides(left, top) == [JunctionSide.RIGHT]

    def test_left_junction(self, placer: ConnectorPlacer) -> None:
        right = Part("right", PartType.RIGHT_PANEL, 582, 0, 0, 18, 720, 554)
        top = Part("top", PartType.TOP_PANEL, 18, 702, 0, 564, 18, 554)
        assert placer.junction_sides(right, top) == [JunctionSide.LEFT]

    def test_far_apart(self, placer: ConnectorPlacer) -> None:
        divider = Part("divider-1", PartType.DIVIDER, 300, 18, 0, 18, 684, 554)
        top = Part("top", PartType.TOP_PANEL, 18, 702, 0, 564, 18, 554)
        assert placer.junction_sides(divider, top) == []

    def test_both_sides(self, placer: ConnectorPlacer) -> None:
        """A horizontal panel can touch both edges of a narrow vertical one."""
        post = Part("divider-1", PartType.DIVIDER, 0, 0, 0, 18, 500, 300)
        shelf = Part("shelf", PartType.SHELF, 10, 100, 0, 15, 18, 300)
        assert placer.junction_sides(post, shelf) == [
            JunctionSide.RIGHT,
            JunctionSide.LEFT,
        ]

    def test_tolerance_from_config(self) -> None:
        left = Part("left", PartType.LEFT_PANEL, 0, 0, 0, 18, 720, 554)
        shelf = Part("shelf", PartType.SHELF, 58, 300, 0, 500, 18, 544)
        assert ConnectorPlacer().junction_sides(left, shelf) == []
        wide = ConnectorPlacer(tolerances=Tolerances(junction_tolerance=50))
        assert wide.junction_sides(left, shelf) == [JunctionSide.RIGHT]


class TestPlaceConnectors:
    """Tests for ConnectorPlacer.place_connectors."""

    def test_editor_cabinet(self, template_state) -> None:
        connectors = ConnectorPlacer().place_connectors(template_state.parts)
        # 2 side panels x (top, bottom, shelf) x 3 connectors
        assert len(connectors) == 18

    def test_initial_editor_state(self) -> None:
        connectors = ConnectorPlacer().place_connectors(DesignState.initial().parts)
        assert len(connectors) == 18

    def test_ids_unique(self, two_compartment_cabinet) -> None:
        connectors = ConnectorPlacer().place_connectors(two_compartment_cabinet)
        ids = [c.id for c in connectors]
        assert len(ids) == len(set(ids))
        assert len(connectors) == 36

    def test_first_connector(self, default_cabinet) -> None:
        connectors = ConnectorPlacer().place_connectors(default_cabinet)
        first = connectors[0]
        assert first.id == "verbinder-left-top-r-0"
        assert (first.panel1_id, first.panel2_id) == ("left", "top")
        assert first.side is JunctionSide.RIGHT
        assert first.connector_type == "vertical-horizontal-right"
        assert (first.x, first.y, first.z) == (9, 711, 32)

    def test_right_panel_connector(self, default_cabinet) -> None:
        connectors = ConnectorPlacer().place_connectors(default_cabinet)
        connector = next(c for c in connectors if c.id == "verbinder-right-top-l-0")
        assert connector.x == 591
        assert connector.side is JunctionSide.LEFT

    def test_holes(self, default_cabinet) -> None:
        connectors = ConnectorPlacer().place_connectors(default_cabinet)
        first = connectors[0]
        assert first.front_hole.face is HoleFace.FRONT
        assert (first.front_hole.x, first.front_hole.y) == (32, 711)
        assert first.front_hole.depth == 12
        assert first.side_hole.face is HoleFace.SIDE
        assert (first.side_hole.x, first.side_hole.y) == (32, 9)
        assert first.side_hole.depth == 25

    def test_shelf_joint_uses_shallower_panel(self, default_cabinet) -> None:
        connectors = ConnectorPlacer().place_connectors(default_cabinet)
        shelf_connectors = [c for c in connectors if c.panel2_id == "shelf-0-1"]
        assert len(shelf_connectors) == 6
        zs = sorted({c.z for c in shelf_connectors})
        assert zs == pytest.approx([32, 272, 512])

    def test_doors_and_back_ignored(self, default_cabinet) -> None:
        connectors = ConnectorPlacer().place_connectors(default_cabinet)
        joined = {c.panel1_id for c in connectors} | {c.panel2_id for c in connectors}
        assert "door-0" not in joined
        assert "back" not in joined

    def test_smaller_spacing_more_connectors(self, default_cabinet) -> None:
        coarse = ConnectorPlacer(ConnectorPattern(spacing=400))
        fine = ConnectorPlacer(ConnectorPattern(spacing=100))
        assert len(fine.place_connectors(default_cabinet)) > len(
            coarse.place_connectors(default_cabinet)
        )
