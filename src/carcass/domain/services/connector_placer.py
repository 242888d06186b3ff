"""Connector ("verbinder") placement at panel junctions.

For every pair of a vertical structural panel (sides, dividers) and a
horizontal structural panel (top, bottom, shelves) whose edges meet, a row
of connectors is laid out along the depth of the joint. Each connector
carries a front hole into the vertical panel's face and a side hole into
the horizontal panel's edge.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ..entities import Connector, Hole, Part
from ..value_objects import (
    CONNECTOR_FRONT_HOLE_DEPTH,
    CONNECTOR_INSET,
    CONNECTOR_SIDE_HOLE_DEPTH,
    DEFAULT_PATTERN,
    DEFAULT_TOLERANCES,
    ConnectorPattern,
    HoleFace,
    JunctionSide,
    Tolerances,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ConnectorPlacer",
    "connector_count",
    "connector_depths",
    "connector_id",
]

MIN_CONNECTORS_PER_JUNCTION = 2


def connector_count(connection_depth: float, pattern: ConnectorPattern) -> int:
    """Number of connectors along a joint of the given depth.

    Never fewer than two; otherwise one more than the number of whole
    ``spacing`` intervals that fit between the two edge offsets.
    """
    available = connection_depth - 2 * pattern.edge_offset
    return max(
        MIN_CONNECTORS_PER_JUNCTION, math.floor(available / pattern.spacing) + 1
    )


def connector_depths(
    start_z: float, connection_depth: float, pattern: ConnectorPattern
) -> list[float]:
    """Z positions of the connectors along a joint.

    The first and last connector sit exactly ``edge_offset`` from the
    joint's ends; the rest are spread evenly in between, so the actual
    spacing may differ from the requested one.
    """
    available = connection_depth - 2 * pattern.edge_offset
    count = connector_count(connection_depth, pattern)
    step = available / max(1, count - 1)
    return [start_z + pattern.edge_offset + i * step for i in range(count)]


def connector_id(
    vertical_id: str, horizontal_id: str, side: JunctionSide, index: int
) -> str:
    """Deterministic connector id derived from the joined panels."""
    return f"verbinder-{vertical_id}-{horizontal_id}-{side.code}-{index}"


class ConnectorPlacer:
    """Places connectors at vertical/horizontal panel junctions.

    Attributes:
        pattern: Global spacing and edge offset.
        tolerances: Tolerances providing the junction detection distance.
    """

    def __init__(
        self,
        pattern: ConnectorPattern | None = None,
        tolerances: Tolerances | None = None,
    ) -> None:
        self.pattern = pattern or DEFAULT_PATTERN
        self.tolerances = tolerances or DEFAULT_TOLERANCES

    def junction_sides(self, vertical: Part, horizontal: Part) -> list[JunctionSide]:
        """Sides of ``vertical`` that ``horizontal`` joins on.

        A right-side junction exists when the horizontal panel starts near
        the vertical panel's right edge; a left-side junction when it ends
        near the vertical panel's left edge. Both can hold at once.
        """
        tolerance = self.tolerances.junction_tolerance
        sides: list[JunctionSide] = []
        if abs(horizontal.x - vertical.max_x) < tolerance:
            sides.append(JunctionSide.RIGHT)
        if abs(horizontal.max_x - vertical.x) < tolerance:
            sides.append(JunctionSide.LEFT)
        return sides

    def place_junction(
        self, vertical: Part, horizontal: Part, side: JunctionSide
    ) -> list[Connector]:
        """Lay out the connectors of a single junction."""
        connection_depth = min(vertical.d, horizontal.d)
        x = (
            vertical.max_x - CONNECTOR_INSET
            if side is JunctionSide.RIGHT
            else vertical.x + CONNECTOR_INSET
        )
        y = horizontal.y + horizontal.h / 2

        connectors: list[Connector] = []
        for i, z in enumerate(
            connector_depths(horizontal.z, connection_depth, self.pattern)
        ):
            along = z - horizontal.z
            holes = (
                Hole(
                    face=HoleFace.FRONT,
                    x=along,
                    y=horizontal.y - vertical.y + horizontal.h / 2,
                    depth=CONNECTOR_FRONT_HOLE_DEPTH,
                ),
                Hole(
                    face=HoleFace.SIDE,
                    x=along,
                    y=horizontal.h / 2,
                    depth=CONNECTOR_SIDE_HOLE_DEPTH,
                ),
            )
            connectors.append(
                Connector(
                    id=connector_id(vertical.id, horizontal.id, side, i),
                    panel1_id=vertical.id,
                    panel2_id=horizontal.id,
                    side=side,
                    x=x,
                    y=y,
                    z=z,
                    holes=holes,
                )
            )
        return connectors

    def place_connectors(self, parts: Sequence[Part]) -> list[Connector]:
        """Place connectors at every detected junction.

        Args:
            parts: Current part list.

        Returns:
            Connectors ordered by vertical panel, horizontal panel, side
            (right before left) and index.
        """
        verticals = [p for p in parts if p.part_type.is_vertical_structural]
        horizontals = [p for p in parts if p.part_type.is_horizontal_structural]

        connectors: list[Connector] = []
        for vertical in verticals:
            for horizontal in horizontals:
                for side in self.junction_sides(vertical, horizontal):
                    connectors.extend(self.place_junction(vertical, horizontal, side))

        logger.debug(f"Placed {len(connectors)} connectors")
        return connectors
