"""Static part-type catalogs.

The part catalog maps a part-type tag to its display name and default
envelope. The space-hardware catalog lists the pieces of hardware that can
be fitted into a space together with the boreholes each one needs. Both
are reference data consumed by the geometry core, never computed by it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import HoleFace, PartType, Vector3


@dataclass(frozen=True)
class PartTypeInfo:
    """Catalog entry for a cabinet part type.

    Attributes:
        name: Human-readable display name.
        color: Display color hint for renderers.
        default_size: Default envelope as (w, h, d).
        movable: True for parts that swing open (doors).
    """

    name: str
    color: str
    default_size: Vector3
    movable: bool = False


PART_CATALOG: dict[PartType, PartTypeInfo] = {
    PartType.LEFT_PANEL: PartTypeInfo("Left Panel", "#8B4513", Vector3(18, 720, 560)),
    PartType.RIGHT_PANEL: PartTypeInfo("Right Panel", "#8B4513", Vector3(18, 720, 560)),
    PartType.TOP_PANEL: PartTypeInfo("Top Panel", "#A0522D", Vector3(564, 18, 560)),
    PartType.BOTTOM_PANEL: PartTypeInfo("Bottom Panel", "#A0522D", Vector3(564, 18, 560)),
    PartType.BACK_PANEL: PartTypeInfo("Back Panel", "#D2691E", Vector3(564, 684, 6)),
    PartType.SHELF: PartTypeInfo("Shelf", "#CD853F", Vector3(564, 18, 540)),
    PartType.DOOR: PartTypeInfo("Door", "#DEB887", Vector3(282, 716, 18), movable=True),
    PartType.DRAWER: PartTypeInfo("Drawer", "#F5DEB3", Vector3(540, 150, 500)),
    PartType.DIVIDER: PartTypeInfo("Divider", "#A0522D", Vector3(18, 684, 540)),
}


def lookup_part_type(tag: str | PartType) -> PartTypeInfo | None:
    """Look up a catalog entry by tag.

    Returns None for unknown tags so callers can treat the lookup as a
    no-op instead of failing.
    """
    try:
        return PART_CATALOG.get(PartType(tag))
    except ValueError:
        return None


@dataclass(frozen=True)
class BoreholeTemplate:
    """Borehole position relative to a piece of fitted hardware."""

    x: float
    y: float
    side: HoleFace
    z: float = 0.0


@dataclass(frozen=True)
class SpacePartType:
    """Catalog entry for hardware that can be fitted into a space.

    Attributes:
        id: Stable identifier (e.g. "drawer").
        name: Display name.
        max_width: Largest width the hardware comes in.
        max_height: Largest height the hardware comes in.
        max_depth: Largest depth the hardware comes in.
        color: Display color hint.
        boreholes: Holes drilled for this hardware, relative to its origin.
    """

    id: str
    name: str
    max_width: float
    max_height: float
    max_depth: float
    color: str = "#808080"
    boreholes: tuple[BoreholeTemplate, ...] = field(default_factory=tuple)


SPACE_PART_TYPES: tuple[SpacePartType, ...] = (
    SpacePartType(
        id="drawer",
        name="Drawer",
        max_width=500,
        max_height=200,
        max_depth=500,
        color="#8B4513",
        boreholes=(
            BoreholeTemplate(20, 50, HoleFace.LEFT),
            BoreholeTemplate(20, 150, HoleFace.LEFT),
            BoreholeTemplate(-20, 50, HoleFace.RIGHT),
            BoreholeTemplate(-20, 150, HoleFace.RIGHT),
        ),
    ),
    SpacePartType(
        id="inner-shelf",
        name="Inner Shelf",
        max_width=600,
        max_height=18,
        max_depth=500,
        color="#DEB887",
        boreholes=(
            BoreholeTemplate(20, 0, HoleFace.LEFT),
            BoreholeTemplate(-20, 0, HoleFace.RIGHT),
        ),
    ),
    SpacePartType(
        id="hinge",
        name="Hinge",
        max_width=50,
        max_height=80,
        max_depth=20,
        color="#C0C0C0",
        boreholes=(
            BoreholeTemplate(25, 20, HoleFace.FRONT),
            BoreholeTemplate(25, 60, HoleFace.FRONT),
        ),
    ),
    SpacePartType(
        id="handle",
        name="Handle",
        max_width=150,
        max_height=30,
        max_depth=30,
        color="#708090",
        boreholes=(
            BoreholeTemplate(30, 15, HoleFace.FRONT),
            BoreholeTemplate(120, 15, HoleFace.FRONT),
        ),
    ),
)


def find_space_part_type(
    type_id: str,
    custom_types: tuple[SpacePartType, ...] = (),
) -> SpacePartType | None:
    """Find a hardware type among the built-in and custom types."""
    for part_type in (*SPACE_PART_TYPES, *custom_types):
        if part_type.id == type_id:
            return part_type
    return None
