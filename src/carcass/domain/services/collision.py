"""Collision detection between cabinet parts.

Every unordered pair of parts is classified as disjoint, valid adjacency
(flush-touching faces) or conflicting overlap. Only conflicting overlaps
are reported; they gate whether a proposed edit may be committed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..entities import CollisionRecord, Part
from ..value_objects import DEFAULT_TOLERANCES, Tolerances

logger = logging.getLogger(__name__)

_ALWAYS_ACCEPTED = frozenset({"open_angle"})

__all__ = [
    "CollisionDetector",
    "EditCheck",
    "boxes_overlap",
    "is_valid_adjacency",
]


def _axis_intervals(part: Part) -> tuple[tuple[float, float], ...]:
    return (
        (part.x, part.max_x),
        (part.y, part.max_y),
        (part.z, part.max_z),
    )


def boxes_overlap(a: Part, b: Part) -> bool:
    """Whether two parts overlap on all three axes (strict inequalities)."""
    return all(
        a_min < b_max and b_min < a_max
        for (a_min, a_max), (b_min, b_max) in zip(
            _axis_intervals(a), _axis_intervals(b)
        )
    )


def is_valid_adjacency(a: Part, b: Part, epsilon: float) -> bool:
    """Whether any pair of opposing faces is within ``epsilon``.

    This lets flush-touching panels overlap by design.
    """
    for (a_min, a_max), (b_min, b_max) in zip(_axis_intervals(a), _axis_intervals(b)):
        if abs(a_max - b_min) < epsilon or abs(b_max - a_min) < epsilon:
            return True
    return False


@dataclass(frozen=True)
class EditCheck:
    """Outcome of evaluating a proposed part edit.

    Attributes:
        accepted: Whether the edit may be committed.
        parts: Candidate part list with the edit applied (unchanged input
            list when the part does not exist).
        collisions: Conflicting overlaps in the candidate list.
        introduced: Conflicting overlaps that did not exist before the edit.
        message: Transient user message for a rejected edit.
    """

    accepted: bool
    parts: tuple[Part, ...]
    collisions: tuple[CollisionRecord, ...] = field(default_factory=tuple)
    introduced: tuple[CollisionRecord, ...] = field(default_factory=tuple)
    message: str | None = None


class CollisionDetector:
    """Detects conflicting overlaps between parts.

    Attributes:
        tolerances: Tolerances providing the adjacency epsilon.
    """

    def __init__(self, tolerances: Tolerances | None = None) -> None:
        self.tolerances = tolerances or DEFAULT_TOLERANCES

    def collision_test(self, a: Part, b: Part) -> CollisionRecord | None:
        """Test a single pair of parts.

        Returns:
            A CollisionRecord for a non-adjacent overlap, otherwise None.
        """
        if not boxes_overlap(a, b):
            return None
        if is_valid_adjacency(a, b, self.tolerances.adjacency_epsilon):
            return None
        return CollisionRecord(
            part_a=a.id,
            part_b=b.id,
            part_a_name=a.display_name,
            part_b_name=b.display_name,
            overlap_x=min(a.max_x, b.max_x) - max(a.x, b.x),
            overlap_y=min(a.max_y, b.max_y) - max(a.y, b.y),
            overlap_z=min(a.max_z, b.max_z) - max(a.z, b.z),
        )

    def find_collisions(self, parts: Sequence[Part]) -> list[CollisionRecord]:
        """Find every conflicting overlap among the parts.

        Pairs are visited in list order (i < j), so the result is
        deterministic for a given part list.
        """
        collisions: list[CollisionRecord] = []
        for i, a in enumerate(parts):
            for b in parts[i + 1 :]:
                record = self.collision_test(a, b)
                if record is not None:
                    collisions.append(record)
        return collisions

    def check_edit(
        self,
        parts: Sequence[Part],
        part_id: str,
        updates: Mapping[str, Any],
    ) -> EditCheck:
        """Evaluate a proposed field edit on one part.

        The edit is accepted when it introduces no conflicting overlap that
        was not already present before the edit, or when it changes nothing
        but the door opening angle. Unknown fields and non-numeric values
        reject the edit with a message.

        Args:
            parts: Current part list.
            part_id: Id of the part being edited.
            updates: Field values to apply.

        Returns:
            EditCheck describing the outcome. An unknown ``part_id`` yields
            a rejected check with the unchanged list and no message.
        """
        if not any(p.id == part_id for p in parts):
            return EditCheck(accepted=False, parts=tuple(parts))

        existing = {_pair_key(c) for c in self.find_collisions(parts)}
        try:
            candidate = tuple(
                p.with_updates(**updates) if p.id == part_id else p for p in parts
            )
        except ValueError as e:
            return EditCheck(accepted=False, parts=tuple(parts), message=str(e))
        collisions = tuple(self.find_collisions(candidate))
        introduced = tuple(c for c in collisions if _pair_key(c) not in existing)
        accepted = not introduced or set(updates) <= _ALWAYS_ACCEPTED

        message = None
        if not accepted:
            relevant = next((c for c in introduced if c.involves(part_id)), None)
            if relevant is not None:
                message = f"Cannot place here: {relevant.describe(part_id)}"
            logger.info(
                f"Rejected edit of '{part_id}': {len(introduced)} new collision(s)"
            )

        return EditCheck(
            accepted=accepted,
            parts=candidate,
            collisions=collisions,
            introduced=introduced,
            message=message,
        )


def _pair_key(record: CollisionRecord) -> frozenset[str]:
    return frozenset((record.part_a, record.part_b))
