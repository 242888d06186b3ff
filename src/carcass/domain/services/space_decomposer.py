"""Space decomposition of the cabinet interior.

Splits the interior into a grid of rectangular voids bounded by the
carcass, dividers and shelves. The grid is built from every distinct X
and Y boundary, so a shelf in one compartment also splits the matching
row of its neighbours. Rows are indexed by grid position rather than by
physical containment.

Intervals exactly spanned by a divider or shelf are panel material and are
not reported as spaces. The heights of the spaces in one column therefore
sum to the interior height less the shelf thicknesses (666 mm for the
default single-shelf cabinet), not to the full interior height of 684 mm.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..entities import Part, Space
from ..value_objects import DEFAULT_TOLERANCES, PartType, Tolerances

logger = logging.getLogger(__name__)

__all__ = ["SpaceDecomposer"]

# Fallback cabinet extents when a boundary panel is missing
DEFAULT_INTERIOR_RIGHT = 600.0
DEFAULT_INTERIOR_TOP = 720.0
DEFAULT_DEPTH = 560.0


class SpaceDecomposer:
    """Computes the enclosed spaces of a cabinet.

    Attributes:
        tolerances: Tolerances providing the minimum space size.
    """

    def __init__(self, tolerances: Tolerances | None = None) -> None:
        self.tolerances = tolerances or DEFAULT_TOLERANCES

    def x_boundaries(self, parts: Sequence[Part]) -> list[float]:
        """Distinct, sorted X boundaries of the compartments."""
        lefts = _of_type(parts, PartType.LEFT_PANEL)
        rights = _of_type(parts, PartType.RIGHT_PANEL)
        dividers = _of_type(parts, PartType.DIVIDER)

        interior_left = min((p.max_x for p in lefts), default=0.0)
        interior_right = max((p.x for p in rights), default=DEFAULT_INTERIOR_RIGHT)
        bounds = {interior_left, interior_right}
        for divider in dividers:
            bounds.add(divider.x)
            bounds.add(divider.max_x)
        return sorted(bounds)

    def y_boundaries(self, parts: Sequence[Part]) -> list[float]:
        """Distinct, sorted Y boundaries of the shelf rows."""
        bottoms = _of_type(parts, PartType.BOTTOM_PANEL)
        tops = _of_type(parts, PartType.TOP_PANEL)
        shelves = _of_type(parts, PartType.SHELF)

        interior_bottom = max((p.max_y for p in bottoms), default=0.0)
        interior_top = min((p.y for p in tops), default=DEFAULT_INTERIOR_TOP)
        bounds = {interior_bottom, interior_top}
        for shelf in shelves:
            bounds.add(shelf.y)
            bounds.add(shelf.max_y)
        return sorted(bounds)

    def cabinet_depth(self, parts: Sequence[Part]) -> float:
        """Usable depth: distance from the front to the back panel."""
        backs = _of_type(parts, PartType.BACK_PANEL)
        return min((p.z for p in backs), default=DEFAULT_DEPTH)

    def compute_spaces(self, parts: Sequence[Part]) -> list[Space]:
        """Compute every enclosed space of the cabinet.

        Grid cells that are not strictly wider and taller than the minimum
        space size are dropped silently, as are intervals filled by the
        thickness of a divider or shelf. Indices keep their position in the
        full boundary grid.

        Args:
            parts: Current part list.

        Returns:
            Spaces ordered by compartment, then row, with ids
            ``space-1`` .. ``space-n`` in that order.
        """
        xs = self.x_boundaries(parts)
        ys = self.y_boundaries(parts)
        depth = self.cabinet_depth(parts)
        min_size = self.tolerances.min_space_size
        divider_spans = {
            (p.x, p.max_x) for p in _of_type(parts, PartType.DIVIDER)
        }
        shelf_spans = {(p.y, p.max_y) for p in _of_type(parts, PartType.SHELF)}

        spaces: list[Space] = []
        for i, (x1, x2) in enumerate(zip(xs, xs[1:])):
            if (x1, x2) in divider_spans:
                continue
            for j, (y1, y2) in enumerate(zip(ys, ys[1:])):
                if (y1, y2) in shelf_spans:
                    continue
                width = x2 - x1
                height = y2 - y1
                if width > min_size and height > min_size:
                    spaces.append(
                        Space(
                            id=f"space-{len(spaces) + 1}",
                            x=x1,
                            y=y1,
                            width=width,
                            height=height,
                            depth=depth,
                            compartment_index=i,
                            shelf_index=j,
                        )
                    )

        logger.debug(
            f"Decomposed {len(xs) - 1}x{len(ys) - 1} grid into {len(spaces)} spaces"
        )
        return spaces


def _of_type(parts: Sequence[Part], part_type: PartType) -> list[Part]:
    return [p for p in parts if p.part_type is part_type]
