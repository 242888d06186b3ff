"""Immutable design state.

A ``DesignState`` is the complete editable design: the part list with its
undo/redo history plus the override data (fitted hardware, connector
offsets, pattern, tolerances) that the derived views are computed from.
Actions in ``commands`` never mutate a state; they return a new one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from carcass.domain import (
    ConnectorPattern,
    Offset2D,
    Part,
    PartType,
    SpacePart,
    SpacePartType,
    Tolerances,
    Vector3,
)
from carcass.domain.value_objects import DEFAULT_PATTERN, DEFAULT_TOLERANCES

DEFAULT_DESIGN_NAME = "New Cabinet Design"


@dataclass(frozen=True)
class Room:
    """Room the cabinet is placed in.

    Room elements (windows, doors, lights) are carried through unchanged
    for renderers; the geometry engine does not interpret them.
    """

    width: float = 4000.0
    height: float = 2800.0
    depth: float = 3500.0
    floor_color: str = "#E8DCC8"
    wall_color: str = "#F5F5F5"
    elements: tuple[dict[str, Any], ...] = field(default_factory=tuple)


def default_parts() -> tuple[Part, ...]:
    """The editor's starting cabinet: a 600x720x560 carcass with one shelf."""
    return (
        Part("left", PartType.LEFT_PANEL, 0, 0, 0, 18, 720, 560),
        Part("right", PartType.RIGHT_PANEL, 582, 0, 0, 18, 720, 560),
        Part("top", PartType.TOP_PANEL, 18, 702, 0, 564, 18, 560),
        Part("bottom", PartType.BOTTOM_PANEL, 18, 0, 0, 564, 18, 560),
        Part("back", PartType.BACK_PANEL, 18, 18, 554, 564, 684, 6),
        Part("shelf1", PartType.SHELF, 18, 360, 10, 564, 18, 540),
        Part("door1", PartType.DOOR, 18, 2, -20, 282, 716, 18, open_angle=0.0),
    )


@dataclass(frozen=True)
class DesignState:
    """Snapshot of an editable cabinet design.

    Attributes:
        parts: Current part list. The only primary geometry.
        history: Part-list frames for undo/redo.
        history_index: Index of ``parts`` within ``history``.
        space_parts: Hardware fitted into spaces.
        connector_offsets: Sparse per-connector drag offsets, keyed by
            connector id.
        pattern: Global connector pattern.
        tolerances: Geometric tolerances for all derived views.
        custom_space_part_types: User-defined hardware types.
        design_name: Display name of the design.
        room: Room the cabinet is placed in.
        cabinet_position: Cabinet origin inside the room.
        message: Transient message from the last rejected action.
    """

    parts: tuple[Part, ...]
    history: tuple[tuple[Part, ...], ...]
    history_index: int = 0
    space_parts: tuple[SpacePart, ...] = ()
    connector_offsets: Mapping[str, Offset2D] = field(default_factory=dict)
    pattern: ConnectorPattern = DEFAULT_PATTERN
    tolerances: Tolerances = DEFAULT_TOLERANCES
    custom_space_part_types: tuple[SpacePartType, ...] = ()
    design_name: str = DEFAULT_DESIGN_NAME
    room: Room = field(default_factory=Room)
    cabinet_position: Vector3 = Vector3(0.0, 0.0, 0.0)
    message: str | None = None

    @classmethod
    def initial(cls) -> DesignState:
        """State of a fresh editor session."""
        parts = default_parts()
        return cls(parts=parts, history=(parts,))

    @classmethod
    def from_parts(cls, parts: tuple[Part, ...], **kwargs: Any) -> DesignState:
        """State whose history starts at ``parts``."""
        return cls(parts=parts, history=(parts,), history_index=0, **kwargs)

    @property
    def can_undo(self) -> bool:
        return self.history_index > 0

    @property
    def can_redo(self) -> bool:
        return self.history_index < len(self.history) - 1

    def find_part(self, part_id: str) -> Part | None:
        return next((p for p in self.parts if p.id == part_id), None)

    def commit(self, parts: tuple[Part, ...]) -> DesignState:
        """Commit a new part list as one history frame.

        Frames after the current index (the redo tail) are discarded.
        """
        history = (*self.history[: self.history_index + 1], parts)
        return replace(
            self,
            parts=parts,
            history=history,
            history_index=len(history) - 1,
            message=None,
        )
