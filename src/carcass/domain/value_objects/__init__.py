"""Value objects for the cabinet geometry domain."""

from ._core_geometry import Offset2D, Vector3
from ._parts import BoreholeSource, HoleFace, HoleKind, JunctionSide, PartType
from ._tolerances import (
    BACK_PANEL_THICKNESS,
    BOREHOLE_DEPTH,
    BOREHOLE_DIAMETER,
    CONNECTOR_FRONT_HOLE_DEPTH,
    CONNECTOR_HOLE_DIAMETER,
    CONNECTOR_INSET,
    CONNECTOR_SIDE_HOLE_DEPTH,
    DEFAULT_PATTERN,
    DEFAULT_TOLERANCES,
    PANEL_THICKNESS,
    ConnectorPattern,
    Tolerances,
)

__all__ = [
    "BACK_PANEL_THICKNESS",
    "BOREHOLE_DEPTH",
    "BOREHOLE_DIAMETER",
    "BoreholeSource",
    "CONNECTOR_FRONT_HOLE_DEPTH",
    "CONNECTOR_HOLE_DIAMETER",
    "CONNECTOR_INSET",
    "CONNECTOR_SIDE_HOLE_DEPTH",
    "ConnectorPattern",
    "DEFAULT_PATTERN",
    "DEFAULT_TOLERANCES",
    "HoleFace",
    "HoleKind",
    "JunctionSide",
    "Offset2D",
    "PANEL_THICKNESS",
    "PartType",
    "Tolerances",
    "Vector3",
]
