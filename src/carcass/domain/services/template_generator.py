"""Template generator for compartment/shelf cabinets.

Builds the initial, ordered part list of a cabinet from six template
parameters. The output is a pure function of the inputs: the same template
always yields the same parts with the same ids, which is what keeps
per-connector offsets (keyed on panel ids) meaningful across regeneration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..entities import Part
from ..value_objects import BACK_PANEL_THICKNESS, PANEL_THICKNESS, PartType

logger = logging.getLogger(__name__)

__all__ = [
    "TemplateConfig",
    "TemplateGenerator",
    "generate_cabinet",
]

# Gap between a door and the compartment edges
DOOR_GAP = 2.0
# Shelves are set back from the back panel by this much
SHELF_SETBACK = 10.0


def _coerce_number(value: Any, default: float, minimum: float | None = None) -> float:
    """Parse a numeric field, reverting to ``default`` on malformed input."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number or (minimum is not None and number < minimum):
        return default
    return number


@dataclass(frozen=True)
class TemplateConfig:
    """Template parameters for a cabinet.

    Attributes:
        width: Overall width in millimetres.
        height: Overall height in millimetres.
        depth: Overall depth in millimetres, back panel included.
        compartments: Number of side-by-side compartments (>= 1).
        shelves_per_compartment: Shelves in each compartment (>= 0).
        share_walls: Whether adjacent compartments share their divider.
    """

    width: float = 600.0
    height: float = 720.0
    depth: float = 560.0
    compartments: int = 1
    shelves_per_compartment: int = 1
    share_walls: bool = True

    def validate(self) -> list[str]:
        """Validate the template and return a list of error messages."""
        errors: list[str] = []
        if self.width <= 2 * PANEL_THICKNESS:
            errors.append("Width must exceed two panel thicknesses")
        if self.height <= 2 * PANEL_THICKNESS + 2 * DOOR_GAP:
            errors.append("Height must exceed two panel thicknesses and door gaps")
        if self.depth <= BACK_PANEL_THICKNESS + SHELF_SETBACK:
            errors.append("Depth must exceed the back panel and shelf setback")
        if self.compartments < 1:
            errors.append("Compartment count must be at least 1")
        else:
            dividers = (self.compartments - 1) * PANEL_THICKNESS
            interior = self.width - 2 * PANEL_THICKNESS
            if self.share_walls:
                interior -= dividers
            if interior / self.compartments <= 2 * DOOR_GAP:
                errors.append("Compartments are too narrow for the given width")
        if self.shelves_per_compartment < 0:
            errors.append("Shelves per compartment cannot be negative")
        return errors

    @classmethod
    def from_raw(
        cls,
        width: Any = None,
        height: Any = None,
        depth: Any = None,
        compartments: Any = None,
        shelves_per_compartment: Any = None,
        share_walls: Any = True,
    ) -> TemplateConfig:
        """Build a template from editor input, substituting safe defaults.

        Malformed or out-of-range numbers fall back to the defaults of a
        600x720x560 single-compartment cabinet with one shelf.
        """
        defaults = cls()
        config = cls(
            width=_coerce_number(width, defaults.width),
            height=_coerce_number(height, defaults.height),
            depth=_coerce_number(depth, defaults.depth),
            compartments=int(
                _coerce_number(compartments, defaults.compartments, minimum=1)
            ),
            shelves_per_compartment=int(
                _coerce_number(
                    shelves_per_compartment,
                    defaults.shelves_per_compartment,
                    minimum=0,
                )
            ),
            share_walls=bool(share_walls),
        )
        if config.validate():
            # Dimensions too small for the carcass; keep counts, reset sizes
            return cls(
                compartments=config.compartments,
                shelves_per_compartment=config.shelves_per_compartment,
                share_walls=config.share_walls,
            )
        return config


class TemplateGenerator:
    """Generates the part list of a cabinet from a template.

    Attributes:
        panel_thickness: Thickness of carcass panels, shelves and doors.
        back_thickness: Thickness of the back panel.
    """

    def __init__(
        self,
        panel_thickness: float = PANEL_THICKNESS,
        back_thickness: float = BACK_PANEL_THICKNESS,
    ) -> None:
        self.panel_thickness = panel_thickness
        self.back_thickness = back_thickness

    def compartment_width(self, config: TemplateConfig) -> float:
        """Interior width of a single compartment.

        Divider thickness is only subtracted when walls are shared. With
        separate walls the compartments split the full interior width and
        each internal boundary still gets a single divider panel.
        """
        t = self.panel_thickness
        interior_width = config.width - 2 * t
        divider_count = config.compartments - 1
        total_divider_width = divider_count * t if config.share_walls else 0.0
        return (interior_width - total_divider_width) / config.compartments

    def compartment_start(self, config: TemplateConfig, index: int) -> float:
        """X coordinate of the left edge of compartment ``index``."""
        t = self.panel_thickness
        shared = index * t if config.share_walls else 0.0
        return t + index * self.compartment_width(config) + shared

    def generate(self, config: TemplateConfig) -> list[Part]:
        """Generate the ordered part list for a template.

        Order: left, right, top, bottom, back, dividers, shelves (per
        compartment, bottom to top), doors (one per compartment).

        Args:
            config: Template parameters.

        Returns:
            New list of parts.

        Raises:
            ValueError: If the template cannot produce positive part sizes.
                Use ``TemplateConfig.from_raw`` for unvalidated input.
        """
        errors = config.validate()
        if errors:
            raise ValueError("; ".join(errors))

        t = self.panel_thickness
        b = self.back_thickness
        width, height, depth = config.width, config.height, config.depth
        carcass_depth = depth - b
        interior_width = width - 2 * t
        cw = self.compartment_width(config)

        parts: list[Part] = [
            Part("left", PartType.LEFT_PANEL, 0, 0, 0, t, height, carcass_depth),
            Part(
                "right", PartType.RIGHT_PANEL, width - t, 0, 0, t, height, carcass_depth
            ),
            Part(
                "top",
                PartType.TOP_PANEL,
                t,
                height - t,
                0,
                interior_width,
                t,
                carcass_depth,
            ),
            Part(
                "bottom", PartType.BOTTOM_PANEL, t, 0, 0, interior_width, t, carcass_depth
            ),
            Part("back", PartType.BACK_PANEL, 0, 0, depth - b, width, height, b),
        ]

        for i in range(1, config.compartments):
            divider_x = t + i * cw + ((i - 1) * t if config.share_walls else 0.0)
            parts.append(
                Part(
                    f"divider-{i}",
                    PartType.DIVIDER,
                    divider_x,
                    t,
                    0,
                    t,
                    height - 2 * t,
                    carcass_depth,
                    is_shared=config.share_walls,
                )
            )

        shelves = config.shelves_per_compartment
        for c in range(config.compartments):
            start_x = self.compartment_start(config, c)
            for s in range(1, shelves + 1):
                shelf_y = t + (s * (height - 2 * t)) / (shelves + 1)
                parts.append(
                    Part(
                        f"shelf-{c}-{s}",
                        PartType.SHELF,
                        start_x,
                        shelf_y,
                        0,
                        cw,
                        t,
                        carcass_depth - SHELF_SETBACK,
                    )
                )

        for c in range(config.compartments):
            parts.append(
                Part(
                    f"door-{c}",
                    PartType.DOOR,
                    self.compartment_start(config, c) + DOOR_GAP,
                    t + DOOR_GAP,
                    -t,
                    cw - 2 * DOOR_GAP,
                    height - 2 * t - 2 * DOOR_GAP,
                    t,
                    open_angle=0.0,
                )
            )

        logger.debug(
            f"Generated {len(parts)} parts for {width}x{height}x{depth} template "
            f"({config.compartments} compartments, {shelves} shelves each)"
        )
        return parts


def generate_cabinet(
    width: float,
    height: float,
    depth: float,
    compartments: int = 1,
    shelves_per_compartment: int = 1,
    share_walls: bool = True,
) -> list[Part]:
    """Generate a cabinet part list with the default panel thicknesses."""
    config = TemplateConfig(
        width=width,
        height=height,
        depth=depth,
        compartments=compartments,
        shelves_per_compartment=shelves_per_compartment,
        share_walls=share_walls,
    )
    return TemplateGenerator().generate(config)
