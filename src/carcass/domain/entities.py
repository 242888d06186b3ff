"""Domain entities for the cabinet geometry engine.

Parts are the only entities with a lifecycle of their own. Spaces,
connectors and boreholes are derived views recomputed from the current
part list and never stored alongside it.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from .catalog import lookup_part_type
from .value_objects import (
    BoreholeSource,
    HoleFace,
    HoleKind,
    JunctionSide,
    PartType,
)


def _checked_updates(
    record: Any, updates: Mapping[str, Any], numeric: frozenset[str]
) -> dict[str, Any]:
    """Validate field updates for a frozen record.

    Numeric fields are coerced to float. A numeric field that is currently
    None (such as the opening angle of a non-door) may stay None.

    Raises:
        ValueError: If a field is unknown or a numeric value is not a
            finite number.
    """
    known = {f.name for f in fields(record)}
    unknown = sorted(set(updates) - known)
    if unknown:
        raise ValueError(
            f"Unknown {type(record).__name__} field(s): {', '.join(unknown)}"
        )

    checked = dict(updates)
    for name in numeric.intersection(checked):
        value = checked[name]
        if value is None and getattr(record, name) is None:
            continue
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Field '{name}' must be a number (got {value!r})") from None
        if not math.isfinite(number):
            raise ValueError(f"Field '{name}' must be finite (got {value!r})")
        checked[name] = number
    return checked


_PART_NUMERIC = frozenset({"x", "y", "z", "w", "h", "d", "rotation", "open_angle"})
_SPACE_PART_NUMERIC = frozenset(
    {"x", "y", "z", "width", "height", "depth", "max_width", "max_height", "max_depth"}
)
_BOREHOLE_NUMERIC = frozenset({"x", "y", "z", "offset_x", "offset_y"})


@dataclass(frozen=True)
class Part:
    """A rigid, axis-aligned box in the cabinet.

    Attributes:
        id: Stable identifier. Connector ids and offsets are keyed on it.
        part_type: Role of the part in the cabinet.
        x: Left edge in millimetres.
        y: Bottom edge in millimetres.
        z: Back edge in millimetres.
        w: Extent along X (width).
        h: Extent along Y (height).
        d: Extent along Z (depth).
        rotation: Rotation in degrees (carried, not used by the geometry).
        open_angle: Door opening angle in degrees, None for non-doors.
        is_shared: For dividers, whether the divider is shared by two
            compartments.
    """

    id: str
    part_type: PartType
    x: float
    y: float
    z: float
    w: float
    h: float
    d: float
    rotation: float = 0.0
    open_angle: float | None = None
    is_shared: bool | None = None

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0 or self.d <= 0:
            raise ValueError(
                f"Part '{self.id}' dimensions must be positive "
                f"(got {self.w}x{self.h}x{self.d})"
            )

    @property
    def max_x(self) -> float:
        return self.x + self.w

    @property
    def max_y(self) -> float:
        return self.y + self.h

    @property
    def max_z(self) -> float:
        return self.z + self.d

    @property
    def display_name(self) -> str:
        """Catalog name for the part type, falling back to the raw tag."""
        info = lookup_part_type(self.part_type)
        return info.name if info else str(self.part_type.value)

    def with_updates(self, **updates: Any) -> Part:
        """Return a copy with the given fields replaced.

        Raises:
            ValueError: If a field is unknown, a numeric value is not a
                finite number, or the resulting size is not positive.
        """
        return replace(self, **_checked_updates(self, updates, _PART_NUMERIC))

    def contains_xy(self, x: float, y: float) -> bool:
        """Whether a point lies within the part's X/Y footprint (inclusive)."""
        return self.x <= x <= self.max_x and self.y <= y <= self.max_y


@dataclass(frozen=True)
class CollisionRecord:
    """A non-adjacent overlap between two parts.

    Exists only transiently; recomputed after each proposed edit.
    """

    part_a: str
    part_b: str
    part_a_name: str
    part_b_name: str
    overlap_x: float
    overlap_y: float
    overlap_z: float

    def involves(self, part_id: str) -> bool:
        return part_id in (self.part_a, self.part_b)

    def other_name(self, part_id: str) -> str:
        """Display name of the part that is not ``part_id``."""
        return self.part_b_name if self.part_a == part_id else self.part_a_name

    def describe(self, part_id: str) -> str:
        """Format the collision from the point of view of ``part_id``."""
        return (
            f'Colliding with "{self.other_name(part_id)}" '
            f"(overlap: {round(self.overlap_x)}×{round(self.overlap_y)}"
            f"×{round(self.overlap_z)}mm)"
        )


@dataclass(frozen=True)
class Space:
    """An enclosed empty volume between structural panels.

    Attributes:
        id: Identifier of the form ``space-<n>``.
        x: Left edge.
        y: Bottom edge.
        width: Extent along X.
        height: Extent along Y.
        depth: Cabinet-wide usable depth.
        compartment_index: Index of the X interval in the boundary grid.
        shelf_index: Index of the Y interval in the boundary grid.
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    depth: float
    compartment_index: int
    shelf_index: int


@dataclass(frozen=True)
class Hole:
    """Drilling definition in panel-local coordinates."""

    face: HoleFace
    x: float
    y: float
    depth: float


@dataclass(frozen=True)
class Connector:
    """A mechanical fastener joining a vertical and a horizontal panel.

    Attributes:
        id: ``verbinder-<vertical>-<horizontal>-<r|l>-<index>``.
        panel1_id: Id of the vertical panel.
        panel2_id: Id of the horizontal panel.
        side: Side of the vertical panel the junction is on.
        x: Absolute X of the connector.
        y: Absolute Y of the connector.
        z: Absolute Z of the connector.
        holes: Front hole (vertical panel face) then side hole
            (horizontal panel edge).
    """

    id: str
    panel1_id: str
    panel2_id: str
    side: JunctionSide
    x: float
    y: float
    z: float
    holes: tuple[Hole, Hole]

    @property
    def connector_type(self) -> str:
        return f"vertical-horizontal-{self.side.value}"

    @property
    def front_hole(self) -> Hole:
        return self.holes[0]

    @property
    def side_hole(self) -> Hole:
        return self.holes[1]


@dataclass(frozen=True)
class SpacePartBorehole:
    """A borehole belonging to fitted hardware, with a user drag offset."""

    id: str
    x: float
    y: float
    side: HoleFace
    z: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def with_updates(self, **updates: Any) -> SpacePartBorehole:
        return replace(self, **_checked_updates(self, updates, _BOREHOLE_NUMERIC))


@dataclass(frozen=True)
class SpacePart:
    """Hardware fitted into a space (drawer, inner shelf, hinge, handle).

    Dimensions are clamped to both the hardware's maximum envelope and the
    hosting space when the part is added.
    """

    id: str
    space_id: str
    type_id: str
    type_name: str
    x: float
    y: float
    z: float
    width: float
    height: float
    depth: float
    max_width: float
    max_height: float
    max_depth: float
    color: str = "#808080"
    boreholes: tuple[SpacePartBorehole, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError(
                f"Space part '{self.id}' dimensions must be positive "
                f"(got {self.width}x{self.height}x{self.depth})"
            )

    def with_updates(self, **updates: Any) -> SpacePart:
        return replace(self, **_checked_updates(self, updates, _SPACE_PART_NUMERIC))


@dataclass(frozen=True)
class Borehole:
    """A drill point in absolute cabinet coordinates.

    Attributes:
        id: Identifier of the hole.
        source: Whether it comes from a connector or fitted hardware.
        face: Face the hole is drilled into.
        depth: Drill depth.
        diameter: Drill diameter.
        absolute_x: Absolute X.
        absolute_y: Absolute Y.
        absolute_z: Absolute Z.
        connector_id: Owning connector, for connector holes.
        part_id: Owning space part, for fitted-hardware holes.
    """

    id: str
    source: BoreholeSource
    face: HoleFace
    depth: float
    diameter: float
    absolute_x: float
    absolute_y: float
    absolute_z: float
    connector_id: str | None = None
    part_id: str | None = None


@dataclass(frozen=True)
class PartHole:
    """A hole attached to a specific part, in that part's coordinates."""

    id: str
    kind: HoleKind
    face: HoleFace
    x: float
    y: float
    depth: float
    diameter: float


@dataclass(frozen=True)
class PartWithHoles:
    """A part together with every hole drilled into it."""

    part: Part
    holes: tuple[PartHole, ...] = field(default_factory=tuple)
