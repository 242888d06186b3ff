"""Assembly of the derived views of a design.

Collisions, spaces, connectors and boreholes are pure functions of the
current part list plus the override data on the state. They are recomputed
from scratch on every call.
"""

from __future__ import annotations

import logging

from carcass.domain import (
    BoreholeAggregator,
    CollisionDetector,
    ConnectorPlacer,
    PartHoleAssembler,
    SpaceDecomposer,
)

from .dtos import DesignOutput
from .state import DesignState

logger = logging.getLogger(__name__)


def assemble_output(state: DesignState) -> DesignOutput:
    """Compute every derived view of a design state.

    Args:
        state: Design state to analyze.

    Returns:
        DesignOutput with parts, per-part holes, spaces, connectors,
        aggregated boreholes and conflicting collisions.
    """
    parts = list(state.parts)
    spaces = SpaceDecomposer(state.tolerances).compute_spaces(parts)
    connectors = ConnectorPlacer(state.pattern, state.tolerances).place_connectors(
        parts
    )
    boreholes = BoreholeAggregator().aggregate(
        connectors, state.connector_offsets, state.space_parts, spaces
    )
    parts_with_holes = PartHoleAssembler().assemble(
        parts, connectors, state.space_parts, spaces
    )
    collisions = CollisionDetector(state.tolerances).find_collisions(parts)

    output = DesignOutput(
        parts=parts,
        parts_with_holes=parts_with_holes,
        spaces=spaces,
        connectors=connectors,
        boreholes=boreholes,
        collisions=collisions,
    )
    logger.debug(f"Assembled output for '{state.design_name}': {output.summary()}")
    return output
