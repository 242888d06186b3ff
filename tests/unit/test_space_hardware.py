"""Unit tests for fitting hardware into spaces."""

import pytest

from carcass.domain import (
    HoleFace,
    SpaceDecomposer,
    SpaceHardwareService,
    Tolerances,
    Vector3,
)
from carcass.domain.catalog import BoreholeTemplate, SpacePartType


@pytest.fixture
def spaces(default_cabinet):
    """space-1: 564x342x554 below the shelf, space-2: 564x324x554 above."""
    return SpaceDecomposer().compute_spaces(default_cabinet)


@pytest.fixture
def service() -> SpaceHardwareService:
    return SpaceHardwareService()


class TestAddPartToSpace:
    """Tests for SpaceHardwareService.add_part_to_space."""

    def test_drawer_clamped_to_type_maximum(self, service, spaces) -> None:
        (drawer,) = service.add_part_to_space((), spaces, "space-1", "drawer")
        assert drawer.id == "space-part-1"
        assert drawer.space_id == "space-1"
        assert drawer.type_name == "Drawer"
        assert (drawer.width, drawer.height, drawer.depth) == (500, 200, 500)
        assert (drawer.max_width, drawer.max_height, drawer.max_depth) == (
            500,
            200,
            500,
        )

    def test_clamped_to_space_less_margin(self, spaces) -> None:
        service = SpaceHardwareService(Tolerances(space_part_margin=200))
        (drawer,) = service.add_part_to_space((), spaces, "space-1", "drawer")
        assert drawer.width == 364
        assert drawer.height == 142
        assert drawer.depth == 354

    def test_boreholes_copied_from_type(self, service, spaces) -> None:
        (drawer,) = service.add_part_to_space((), spaces, "space-1", "drawer")
        assert [bh.id for bh in drawer.boreholes] == [
            "space-part-1-bh-0",
            "space-part-1-bh-1",
            "space-part-1-bh-2",
            "space-part-1-bh-3",
        ]
        first = drawer.boreholes[0]
        assert (first.x, first.y, first.side) == (20, 50, HoleFace.LEFT)
        assert (first.offset_x, first.offset_y) == (0, 0)

    def test_ids_increment(self, service, spaces) -> None:
        parts = service.add_part_to_space((), spaces, "space-1", "drawer")
        parts = service.add_part_to_space(parts, spaces, "space-2", "inner-shelf")
        assert [sp.id for sp in parts] == ["space-part-1", "space-part-2"]
        assert parts[1].height == 18

    def test_ids_follow_highest_suffix(self, service, spaces) -> None:
        parts = service.add_part_to_space((), spaces, "space-1", "drawer")
        parts = service.add_part_to_space(parts, spaces, "space-1", "handle")
        parts = service.delete_space_part(parts, "space-part-1")
        parts = service.add_part_to_space(parts, spaces, "space-2", "hinge")
        assert [sp.id for sp in parts] == ["space-part-2", "space-part-3"]

    def test_position(self, service, spaces) -> None:
        (hinge,) = service.add_part_to_space(
            (), spaces, "space-2", "hinge", Vector3(10, 20, 30)
        )
        assert (hinge.x, hinge.y, hinge.z) == (10, 20, 30)

    def test_unknown_space_is_noop(self, service, spaces) -> None:
        assert service.add_part_to_space((), spaces, "space-99", "drawer") == ()

    def test_unknown_type_is_noop(self, service, spaces) -> None:
        assert service.add_part_to_space((), spaces, "space-1", "wine-rack") == ()

    def test_hardware_that_cannot_fit_is_noop(self, service, default_cabinet) -> None:
        # Shelf lowered to leave a 15 mm gap above the bottom panel
        parts = [
            p.with_updates(y=33) if p.id == "shelf-0-1" else p for p in default_cabinet
        ]
        spaces = SpaceDecomposer().compute_spaces(parts)
        assert spaces[0].height == 15
        assert service.add_part_to_space((), spaces, "space-1", "drawer") == ()
        assert service.add_part_to_space((), spaces, "space-1", "inner-shelf") == ()

    def test_custom_type(self, spaces) -> None:
        rack = SpacePartType(
            id="wine-rack",
            name="Wine Rack",
            max_width=300,
            max_height=300,
            max_depth=400,
            boreholes=(BoreholeTemplate(15, 15, HoleFace.LEFT),),
        )
        service = SpaceHardwareService(custom_types=(rack,))
        (part,) = service.add_part_to_space((), spaces, "space-1", "wine-rack")
        assert part.type_name == "Wine Rack"
        assert len(part.boreholes) == 1


class TestEditHardware:
    """Tests for updating and deleting hardware and its boreholes."""

    @pytest.fixture
    def fitted(self, service, spaces):
        return service.add_part_to_space((), spaces, "space-1", "drawer")

    def test_update_space_part(self, service, fitted) -> None:
        (drawer,) = service.update_space_part(fitted, "space-part-1", {"y": 40})
        assert drawer.y == 40

    def test_update_unknown_is_noop(self, service, fitted) -> None:
        assert service.update_space_part(fitted, "space-part-9", {"y": 40}) == fitted

    @pytest.mark.parametrize(
        "updates", [{"colour": "red"}, {"width": "wide"}, {"height": 0}]
    )
    def test_invalid_update_is_noop(self, service, fitted, updates) -> None:
        assert service.update_space_part(fitted, "space-part-1", updates) == fitted

    def test_delete(self, service, fitted) -> None:
        assert service.delete_space_part(fitted, "space-part-1") == ()
        assert service.delete_space_part(fitted, "space-part-9") == fitted

    def test_update_borehole_offset(self, service, fitted) -> None:
        (drawer,) = service.update_borehole(
            fitted, "space-part-1", "space-part-1-bh-2", {"offset_x": 5, "offset_y": -3}
        )
        moved = drawer.boreholes[2]
        assert (moved.offset_x, moved.offset_y) == (5, -3)
        assert drawer.boreholes[0] == fitted[0].boreholes[0]

    @pytest.mark.parametrize("updates", [{"offsetX": 3}, {"offset_x": "far"}])
    def test_invalid_borehole_update_is_noop(self, service, fitted, updates) -> None:
        result = service.update_borehole(
            fitted, "space-part-1", "space-part-1-bh-0", updates
        )
        assert result == fitted

    def test_update_unknown_borehole_is_noop(self, service, fitted) -> None:
        result = service.update_borehole(
            fitted, "space-part-1", "space-part-1-bh-9", {"offset_x": 5}
        )
        assert result == fitted
