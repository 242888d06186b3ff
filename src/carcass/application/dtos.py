"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from carcass.domain import (
    Borehole,
    CollisionRecord,
    Connector,
    Part,
    PartWithHoles,
    Space,
)

from .state import DesignState


@dataclass(frozen=True)
class EditResult:
    """Outcome of a named design action.

    Attributes:
        state: State after the action. Identical to the input state when the
            action was rejected or referenced something that does not exist,
            except for ``message``.
        accepted: Whether the action changed the design.
        message: Transient message for a rejected action, if any.
    """

    state: DesignState
    accepted: bool
    message: str | None = None


@dataclass
class DesignOutput:
    """Every view derived from a design state.

    Computed on demand by ``assemble_output``; nothing here is cached on the
    state it came from.
    """

    parts: list[Part] = field(default_factory=list)
    parts_with_holes: list[PartWithHoles] = field(default_factory=list)
    spaces: list[Space] = field(default_factory=list)
    connectors: list[Connector] = field(default_factory=list)
    boreholes: list[Borehole] = field(default_factory=list)
    collisions: list[CollisionRecord] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.collisions)

    def summary(self) -> dict[str, int]:
        """Counts of each derived view, for display."""
        return {
            "parts": len(self.parts),
            "spaces": len(self.spaces),
            "connectors": len(self.connectors),
            "boreholes": len(self.boreholes),
            "collisions": len(self.collisions),
        }
