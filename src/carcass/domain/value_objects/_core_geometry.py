"""Core geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """Immutable triple in millimetres.

    Used both for positions (x, y, z) and for sizes (w, h, d).
    Unlike part sizes, components may be negative (doors sit in front
    of the cabinet origin).
    """

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Offset2D:
    """User-applied 2D drag offset in millimetres."""

    x: float = 0.0
    y: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0
