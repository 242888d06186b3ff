"""Fitting hardware (drawers, inner shelves, hinges, handles) into spaces.

All operations are pure: they take the current tuple of space parts and
return a new one. Lookups of unknown spaces, hardware types, parts or
boreholes leave the tuple unchanged.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from ..catalog import SpacePartType, find_space_part_type
from ..entities import Space, SpacePart, SpacePartBorehole
from ..value_objects import DEFAULT_TOLERANCES, Tolerances, Vector3

logger = logging.getLogger(__name__)

__all__ = ["SpaceHardwareService"]

_ID_PATTERN = re.compile(r"^space-part-(\d+)$")


def _next_space_part_id(space_parts: Sequence[SpacePart]) -> str:
    numbers = [
        int(match.group(1))
        for match in (_ID_PATTERN.match(sp.id) for sp in space_parts)
        if match
    ]
    return f"space-part-{max(numbers, default=0) + 1}"


class SpaceHardwareService:
    """Adds, edits and removes hardware fitted into spaces.

    Attributes:
        tolerances: Tolerances providing the clearance kept between
            hardware and the walls of its space.
        custom_types: User-defined hardware types, searched after the
            built-in catalog.
    """

    def __init__(
        self,
        tolerances: Tolerances | None = None,
        custom_types: tuple[SpacePartType, ...] = (),
    ) -> None:
        self.tolerances = tolerances or DEFAULT_TOLERANCES
        self.custom_types = custom_types

    def add_part_to_space(
        self,
        space_parts: Sequence[SpacePart],
        spaces: Sequence[Space],
        space_id: str,
        type_id: str,
        position: Vector3 = Vector3(0, 0, 0),
    ) -> tuple[SpacePart, ...]:
        """Fit a new piece of hardware into a space.

        Each dimension is clamped to the smaller of the hardware's maximum
        and the space's dimension less the clearance margin.

        Args:
            space_parts: Current hardware.
            spaces: Current spaces.
            space_id: Id of the hosting space.
            type_id: Hardware type id.
            position: Position relative to the space origin.

        Returns:
            New tuple with the hardware appended, or the input unchanged when
            the space or type does not exist or the hardware cannot fit.
        """
        hardware_type = find_space_part_type(type_id, self.custom_types)
        space = next((s for s in spaces if s.id == space_id), None)
        if hardware_type is None or space is None:
            logger.debug(f"Ignoring hardware '{type_id}' for space '{space_id}'")
            return tuple(space_parts)

        margin = self.tolerances.space_part_margin
        width = min(hardware_type.max_width, space.width - margin)
        height = min(hardware_type.max_height, space.height - margin)
        depth = min(hardware_type.max_depth, space.depth - margin)
        if width <= 0 or height <= 0 or depth <= 0:
            logger.info(
                f"Hardware '{type_id}' does not fit space '{space_id}' "
                f"({space.width}x{space.height}x{space.depth}, margin {margin})"
            )
            return tuple(space_parts)

        part_id = _next_space_part_id(space_parts)
        new_part = SpacePart(
            id=part_id,
            space_id=space_id,
            type_id=hardware_type.id,
            type_name=hardware_type.name,
            x=position.x,
            y=position.y,
            z=position.z,
            width=width,
            height=height,
            depth=depth,
            max_width=hardware_type.max_width,
            max_height=hardware_type.max_height,
            max_depth=hardware_type.max_depth,
            color=hardware_type.color,
            boreholes=tuple(
                SpacePartBorehole(
                    id=f"{part_id}-bh-{idx}",
                    x=template.x,
                    y=template.y,
                    z=template.z,
                    side=template.side,
                )
                for idx, template in enumerate(hardware_type.boreholes)
            ),
        )
        return (*space_parts, new_part)

    def update_space_part(
        self,
        space_parts: Sequence[SpacePart],
        part_id: str,
        updates: Mapping[str, Any],
    ) -> tuple[SpacePart, ...]:
        """Apply field updates to one piece of hardware.

        Unknown fields, non-numeric values and non-positive sizes leave the
        tuple unchanged.
        """
        try:
            return tuple(
                sp.with_updates(**updates) if sp.id == part_id else sp
                for sp in space_parts
            )
        except ValueError as e:
            logger.debug(f"Ignoring update of hardware '{part_id}': {e}")
            return tuple(space_parts)

    def delete_space_part(
        self, space_parts: Sequence[SpacePart], part_id: str
    ) -> tuple[SpacePart, ...]:
        """Remove one piece of hardware."""
        return tuple(sp for sp in space_parts if sp.id != part_id)

    def update_borehole(
        self,
        space_parts: Sequence[SpacePart],
        part_id: str,
        borehole_id: str,
        updates: Mapping[str, Any],
    ) -> tuple[SpacePart, ...]:
        """Apply updates (typically drag offsets) to one borehole.

        Unknown fields and non-numeric values leave the tuple unchanged.
        """
        result: list[SpacePart] = []
        try:
            for sp in space_parts:
                if sp.id == part_id:
                    sp = sp.with_updates(
                        boreholes=tuple(
                            bh.with_updates(**updates) if bh.id == borehole_id else bh
                            for bh in sp.boreholes
                        )
                    )
                result.append(sp)
        except ValueError as e:
            logger.debug(f"Ignoring update of borehole '{borehole_id}': {e}")
            return tuple(space_parts)
        return tuple(result)
