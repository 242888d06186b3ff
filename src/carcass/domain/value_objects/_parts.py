"""Part type tags and drilling enums."""

from __future__ import annotations

from enum import Enum


class PartType(str, Enum):
    """Types of parts that make up a cabinet.

    Values use the tags of the editor's persisted design documents so that
    documents round-trip without translation.
    """

    LEFT_PANEL = "leftPanel"
    RIGHT_PANEL = "rightPanel"
    TOP_PANEL = "topPanel"
    BOTTOM_PANEL = "bottomPanel"
    BACK_PANEL = "backPanel"
    SHELF = "shelf"
    DOOR = "door"
    DRAWER = "drawer"
    DIVIDER = "divider"

    @property
    def is_vertical_structural(self) -> bool:
        """True for panels that carry the front hole of a connector."""
        return self in _VERTICAL_STRUCTURAL

    @property
    def is_horizontal_structural(self) -> bool:
        """True for panels that carry the side hole of a connector."""
        return self in _HORIZONTAL_STRUCTURAL

    @property
    def is_structural(self) -> bool:
        """True for panels that bound spaces (carcass, dividers, shelves)."""
        return (
            self in _VERTICAL_STRUCTURAL
            or self in _HORIZONTAL_STRUCTURAL
            or self is PartType.BACK_PANEL
        )


_VERTICAL_STRUCTURAL = frozenset(
    {PartType.LEFT_PANEL, PartType.RIGHT_PANEL, PartType.DIVIDER}
)
_HORIZONTAL_STRUCTURAL = frozenset(
    {PartType.TOP_PANEL, PartType.BOTTOM_PANEL, PartType.SHELF}
)


class HoleFace(str, Enum):
    """Face of a panel a hole is drilled into.

    Attributes:
        FRONT..BOTTOM: The six faces of a box-shaped panel.
        SIDE: Edge drilling into a horizontal panel for a connector.
    """

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    SIDE = "side"

    @property
    def face_code(self) -> int:
        """Numeric machining face code used by drilling programs."""
        return _FACE_CODES[self]


_FACE_CODES: dict[HoleFace, int] = {
    HoleFace.FRONT: 1,
    HoleFace.RIGHT: 2,
    HoleFace.BACK: 3,
    HoleFace.LEFT: 4,
    HoleFace.TOP: 5,
    HoleFace.BOTTOM: 6,
    HoleFace.SIDE: 2,
}


class BoreholeSource(str, Enum):
    """Origin of a borehole in the aggregated drill list."""

    CONNECTOR = "connector"
    SPACE_PART = "spacePart"


class JunctionSide(str, Enum):
    """Side of the vertical panel a horizontal panel joins on."""

    RIGHT = "right"
    LEFT = "left"

    @property
    def code(self) -> str:
        """Single-letter code embedded in connector ids."""
        return "r" if self is JunctionSide.RIGHT else "l"


class HoleKind(str, Enum):
    """Kind of hole attached to a part for manufacturing."""

    VERBINDER = "verbinder"
    BOREHOLE = "borehole"
