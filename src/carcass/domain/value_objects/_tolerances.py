"""Tolerances, connector pattern and drilling constants.

Centralizes the numeric tolerances used by the collision detector,
connector placer and space decomposer so each component receives them
explicitly instead of hard-coding its own epsilon.
"""

from __future__ import annotations

from dataclasses import dataclass

# Carcass material
PANEL_THICKNESS: float = 18.0
BACK_PANEL_THICKNESS: float = 6.0

# Connector ("verbinder") drilling
CONNECTOR_HOLE_DIAMETER: float = 8.0
CONNECTOR_FRONT_HOLE_DEPTH: float = 12.0
CONNECTOR_SIDE_HOLE_DEPTH: float = 25.0
CONNECTOR_INSET: float = 9.0  # half of an 18mm panel

# Fitted hardware drilling
BOREHOLE_DIAMETER: float = 5.0
BOREHOLE_DEPTH: float = 12.0


@dataclass(frozen=True)
class Tolerances:
    """Named geometric tolerances in millimetres.

    Attributes:
        adjacency_epsilon: Face distance under which two overlapping parts
            count as flush-touching rather than colliding.
        junction_tolerance: Edge distance under which a horizontal panel is
            considered joined to a vertical panel.
        min_space_size: Spaces must be strictly wider and taller than this.
        space_part_margin: Clearance subtracted from a space's dimensions
            when sizing fitted hardware.
    """

    adjacency_epsilon: float = 2.0
    junction_tolerance: float = 30.0
    min_space_size: float = 10.0
    space_part_margin: float = 20.0

    def __post_init__(self) -> None:
        if self.adjacency_epsilon <= 0:
            raise ValueError("adjacency_epsilon must be positive")
        if self.junction_tolerance <= 0:
            raise ValueError("junction_tolerance must be positive")
        if self.min_space_size <= 0:
            raise ValueError("min_space_size must be positive")
        if self.space_part_margin < 0:
            raise ValueError("space_part_margin cannot be negative")


@dataclass(frozen=True)
class ConnectorPattern:
    """Global connector placement pattern.

    Attributes:
        spacing: Requested distance between connectors along the joint.
        edge_offset: Distance of the first and last connector from the
            front and back of the joint.
        offset_x: Pattern-wide horizontal adjustment (stored, not applied).
        offset_y: Pattern-wide vertical adjustment (stored, not applied).
    """

    spacing: float = 200.0
    edge_offset: float = 32.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            raise ValueError("spacing must be positive")
        if self.edge_offset < 0:
            raise ValueError("edge_offset cannot be negative")


DEFAULT_TOLERANCES = Tolerances()
DEFAULT_PATTERN = ConnectorPattern()
