"""Aggregation of drill points into absolute and per-part hole lists.

Two hole sources feed manufacturing: connector holes and boreholes of
hardware fitted into spaces. ``BoreholeAggregator`` flattens both into one
list in absolute cabinet coordinates; ``PartHoleAssembler`` attaches each
hole to the part it is drilled into, in that part's coordinates.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from ..entities import (
    Borehole,
    Connector,
    Part,
    PartHole,
    PartWithHoles,
    Space,
    SpacePart,
    SpacePartBorehole,
)
from ..value_objects import (
    BOREHOLE_DEPTH,
    BOREHOLE_DIAMETER,
    CONNECTOR_FRONT_HOLE_DEPTH,
    CONNECTOR_HOLE_DIAMETER,
    CONNECTOR_INSET,
    CONNECTOR_SIDE_HOLE_DEPTH,
    BoreholeSource,
    HoleFace,
    HoleKind,
    Offset2D,
)

__all__ = [
    "BoreholeAggregator",
    "PartHoleAssembler",
]

_NO_OFFSET = Offset2D()


def _hosted_boreholes(
    space_parts: Sequence[SpacePart], spaces: Sequence[Space]
) -> Iterator[tuple[SpacePart, SpacePartBorehole, float, float]]:
    """Yield (space part, hole, abs x, abs y) for parts with a live host.

    Hardware whose space no longer exists contributes nothing.
    """
    spaces_by_id = {space.id: space for space in spaces}
    for space_part in space_parts:
        space = spaces_by_id.get(space_part.space_id)
        if space is None:
            continue
        for hole in space_part.boreholes:
            abs_x = space.x + space_part.x + hole.x + hole.offset_x
            abs_y = space.y + space_part.y + hole.y + hole.offset_y
            yield space_part, hole, abs_x, abs_y


class BoreholeAggregator:
    """Merges connector and fitted-hardware holes into one list."""

    def aggregate(
        self,
        connectors: Sequence[Connector],
        connector_offsets: Mapping[str, Offset2D],
        space_parts: Sequence[SpacePart],
        spaces: Sequence[Space],
    ) -> list[Borehole]:
        """Build the absolute-coordinate drill list.

        Fitted-hardware holes come first, then connector holes.

        Args:
            connectors: Connectors from the connector placer.
            connector_offsets: Sparse per-connector drag offsets.
            space_parts: Hardware fitted into spaces.
            spaces: Spaces hosting the hardware.

        Returns:
            Boreholes with source discriminators and owner references.
        """
        boreholes: list[Borehole] = []

        for space_part, hole, abs_x, abs_y in _hosted_boreholes(space_parts, spaces):
            boreholes.append(
                Borehole(
                    id=hole.id,
                    source=BoreholeSource.SPACE_PART,
                    face=hole.side,
                    depth=BOREHOLE_DEPTH,
                    diameter=BOREHOLE_DIAMETER,
                    absolute_x=abs_x,
                    absolute_y=abs_y,
                    absolute_z=space_part.z + hole.z,
                    part_id=space_part.id,
                )
            )

        for connector in connectors:
            offset = connector_offsets.get(connector.id, _NO_OFFSET)
            for index, hole in enumerate(connector.holes):
                boreholes.append(
                    Borehole(
                        id=f"{connector.id}-hole-{index}",
                        source=BoreholeSource.CONNECTOR,
                        face=hole.face,
                        depth=hole.depth,
                        diameter=CONNECTOR_HOLE_DIAMETER,
                        absolute_x=connector.x + offset.x + hole.x,
                        absolute_y=connector.y + offset.y + hole.y,
                        absolute_z=connector.z,
                        connector_id=connector.id,
                    )
                )

        return boreholes


class PartHoleAssembler:
    """Attaches holes to the parts they are drilled into.

    The vertical panel of a connector receives the front hole, the
    horizontal panel the side hole. Fitted-hardware boreholes are attached
    to every part whose X/Y footprint contains their absolute position.
    """

    def assemble(
        self,
        parts: Sequence[Part],
        connectors: Sequence[Connector],
        space_parts: Sequence[SpacePart],
        spaces: Sequence[Space],
    ) -> list[PartWithHoles]:
        """Build the augmented part list.

        Returns:
            One entry per part, in part-list order.
        """
        hosted = list(_hosted_boreholes(space_parts, spaces))
        result: list[PartWithHoles] = []

        for part in parts:
            holes: list[PartHole] = []
            for connector in connectors:
                if (
                    connector.panel1_id == part.id
                    and part.part_type.is_vertical_structural
                ):
                    holes.append(
                        PartHole(
                            id=f"{connector.id}-front",
                            kind=HoleKind.VERBINDER,
                            face=HoleFace.FRONT,
                            x=connector.z - part.z,
                            y=connector.y - part.y,
                            depth=CONNECTOR_FRONT_HOLE_DEPTH,
                            diameter=CONNECTOR_HOLE_DIAMETER,
                        )
                    )
                elif (
                    connector.panel2_id == part.id
                    and part.part_type.is_horizontal_structural
                ):
                    holes.append(
                        PartHole(
                            id=f"{connector.id}-side",
                            kind=HoleKind.VERBINDER,
                            face=HoleFace.SIDE,
                            x=connector.z - part.z,
                            y=CONNECTOR_INSET,
                            depth=CONNECTOR_SIDE_HOLE_DEPTH,
                            diameter=CONNECTOR_HOLE_DIAMETER,
                        )
                    )

            for _, hole, abs_x, abs_y in hosted:
                if part.contains_xy(abs_x, abs_y):
                    holes.append(
                        PartHole(
                            id=hole.id,
                            kind=HoleKind.BOREHOLE,
                            face=hole.side,
                            x=abs_x - part.x,
                            y=abs_y - part.y,
                            depth=BOREHOLE_DEPTH,
                            diameter=BOREHOLE_DIAMETER,
                        )
                    )

            result.append(PartWithHoles(part=part, holes=tuple(holes)))

        return result
