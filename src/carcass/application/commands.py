"""Named design actions (use cases).

Every action takes a ``DesignState`` and returns an ``EditResult`` carrying
the next state. Part-list edits are gated by the collision detector and
committed as a single history frame; actions that reference a part, space,
hardware type or connector that does not exist return the input state
unchanged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from carcass.domain import (
    CollisionDetector,
    ConnectorPattern,
    ConnectorPlacer,
    Offset2D,
    Part,
    PartType,
    SpaceDecomposer,
    SpaceHardwareService,
    SpacePart,
    TemplateConfig,
    TemplateGenerator,
    Vector3,
    lookup_part_type,
)

from .config.adapter import document_to_state
from .config.schema import DesignDocument
from .dtos import EditResult
from .state import DesignState

logger = logging.getLogger(__name__)

# Where the editor drops a newly generated cabinet inside the room
TEMPLATE_CABINET_POSITION = Vector3(200.0, 0.0, 200.0)
# Where a newly added part appears
NEW_PART_POSITION = Vector3(100.0, 100.0, 100.0)

_POSITION_FIELDS = frozenset({"x", "y", "z", "rotation", "open_angle"})
_SIZE_FIELDS = {"w": "x", "h": "y", "d": "z"}


def _format_dimension(value: float) -> str:
    return f"{value:g}"


class DesignCommands:
    """Named actions on a design state.

    Services that depend on the state's tolerances or pattern are built per
    call; the template generator is injected.
    """

    def __init__(self, template_generator: TemplateGenerator | None = None) -> None:
        self.template_generator = template_generator or TemplateGenerator()

    # -- part list -----------------------------------------------------------

    def apply_template(self, state: DesignState, config: TemplateConfig) -> EditResult:
        """Replace the design with a generated cabinet.

        History is reset to the generated parts; fitted hardware and
        connector offsets are cleared because their ids no longer apply.
        """
        errors = config.validate()
        if errors:
            message = "; ".join(errors)
            return EditResult(replace(state, message=message), False, message)

        parts = tuple(self.template_generator.generate(config))
        new_state = replace(
            state,
            parts=parts,
            history=(parts,),
            history_index=0,
            space_parts=(),
            connector_offsets={},
            design_name=(
                f"Cabinet {_format_dimension(config.width)}"
                f"×{_format_dimension(config.height)}"
                f"×{_format_dimension(config.depth)}"
            ),
            cabinet_position=TEMPLATE_CABINET_POSITION,
            message=None,
        )
        logger.info(f"Applied template: {new_state.design_name} ({len(parts)} parts)")
        return EditResult(new_state, True)

    def update_part(
        self, state: DesignState, part_id: str, updates: Mapping[str, Any]
    ) -> EditResult:
        """Apply field updates to one part if they introduce no new collision.

        Edits that change nothing but a door's opening angle are always
        accepted. Unknown fields and non-numeric values are rejected with a
        message instead of raising.
        """
        check = CollisionDetector(state.tolerances).check_edit(
            state.parts, part_id, updates
        )
        if check.accepted:
            return EditResult(state.commit(check.parts), True)
        if check.message is None:
            return EditResult(state, False)
        return EditResult(replace(state, message=check.message), False, check.message)

    def update_part_field(
        self, state: DesignState, part_id: str, field_name: str, raw: Any
    ) -> EditResult:
        """Apply a single raw (typically textual) field value to a part.

        Malformed numbers fall back to a safe default: 0 for position,
        rotation and opening angle, the catalog default for a size.
        """
        part = state.find_part(part_id)
        if part is None:
            return EditResult(state, False)

        if field_name in _POSITION_FIELDS:
            value = self._coerce(raw, default=0.0)
        elif field_name in _SIZE_FIELDS:
            value = self._coerce(raw, default=self._default_size(part, field_name))
            if value <= 0:
                value = self._default_size(part, field_name)
        else:
            message = f"Unknown part field '{field_name}'"
            return EditResult(replace(state, message=message), False, message)

        return self.update_part(state, part_id, {field_name: value})

    def add_part(self, state: DesignState, part_type: str | PartType) -> EditResult:
        """Add a catalog part with its default size at the drop position."""
        info = lookup_part_type(part_type)
        if info is None:
            return EditResult(state, False)

        part_type = PartType(part_type)
        part = Part(
            id=self._next_part_id(state, part_type),
            part_type=part_type,
            x=NEW_PART_POSITION.x,
            y=NEW_PART_POSITION.y,
            z=NEW_PART_POSITION.z,
            w=info.default_size.x,
            h=info.default_size.y,
            d=info.default_size.z,
            open_angle=0.0 if part_type is PartType.DOOR else None,
        )
        return EditResult(state.commit((*state.parts, part)), True)

    def delete_part(self, state: DesignState, part_id: str) -> EditResult:
        if state.find_part(part_id) is None:
            return EditResult(state, False)
        parts = tuple(p for p in state.parts if p.id != part_id)
        return EditResult(state.commit(parts), True)

    def undo(self, state: DesignState) -> EditResult:
        if not state.can_undo:
            return EditResult(state, False)
        index = state.history_index - 1
        return EditResult(
            replace(state, parts=state.history[index], history_index=index), True
        )

    def redo(self, state: DesignState) -> EditResult:
        if not state.can_redo:
            return EditResult(state, False)
        index = state.history_index + 1
        return EditResult(
            replace(state, parts=state.history[index], history_index=index), True
        )

    # -- fitted hardware -----------------------------------------------------

    def add_space_part(
        self,
        state: DesignState,
        space_id: str,
        type_id: str,
        position: Vector3 = Vector3(0.0, 0.0, 0.0),
    ) -> EditResult:
        """Fit a piece of hardware into one of the current spaces."""
        spaces = SpaceDecomposer(state.tolerances).compute_spaces(state.parts)
        space_parts = self._hardware(state).add_part_to_space(
            state.space_parts, spaces, space_id, type_id, position
        )
        return self._with_space_parts(state, space_parts)

    def update_space_part(
        self, state: DesignState, part_id: str, updates: Mapping[str, Any]
    ) -> EditResult:
        if not any(sp.id == part_id for sp in state.space_parts):
            return EditResult(state, False)
        space_parts = self._hardware(state).update_space_part(
            state.space_parts, part_id, updates
        )
        return self._with_space_parts(state, space_parts)

    def delete_space_part(self, state: DesignState, part_id: str) -> EditResult:
        space_parts = self._hardware(state).delete_space_part(
            state.space_parts, part_id
        )
        return self._with_space_parts(state, space_parts)

    def update_borehole(
        self,
        state: DesignState,
        part_id: str,
        borehole_id: str,
        updates: Mapping[str, Any],
    ) -> EditResult:
        """Apply updates (usually a drag offset) to a fitted-hardware hole."""
        space_parts = self._hardware(state).update_borehole(
            state.space_parts, part_id, borehole_id, updates
        )
        return self._with_space_parts(state, space_parts)

    # -- connectors ----------------------------------------------------------

    def set_connector_offset(
        self, state: DesignState, connector_id: str, offset: Offset2D
    ) -> EditResult:
        """Record a drag offset for one connector.

        A zero offset removes the entry. Offsets for connectors that are not
        currently placed are ignored.
        """
        placer = ConnectorPlacer(state.pattern, state.tolerances)
        if not any(c.id == connector_id for c in placer.place_connectors(state.parts)):
            return EditResult(state, False)

        offsets = dict(state.connector_offsets)
        if offset.is_zero:
            offsets.pop(connector_id, None)
        else:
            offsets[connector_id] = offset
        return EditResult(replace(state, connector_offsets=offsets), True)

    def set_pattern(self, state: DesignState, pattern: ConnectorPattern) -> EditResult:
        return EditResult(replace(state, pattern=pattern), True)

    # -- documents -----------------------------------------------------------

    def load_design(self, state: DesignState, document: DesignDocument) -> EditResult:
        """Load a persisted design document over the current state.

        An empty part list in the document keeps the current parts.
        """
        new_state = document_to_state(document, base=state)
        logger.info(
            f"Loaded design '{new_state.design_name}' ({len(new_state.parts)} parts)"
        )
        return EditResult(new_state, True)

    # -- helpers -------------------------------------------------------------

    @staticmethod
    def _coerce(raw: Any, default: float) -> float:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            return default
        if not math.isfinite(value):
            return default
        return value

    @staticmethod
    def _default_size(part: Part, field_name: str) -> float:
        info = lookup_part_type(part.part_type)
        size = info.default_size if info else Vector3(1.0, 1.0, 1.0)
        return getattr(size, _SIZE_FIELDS[field_name])

    @staticmethod
    def _next_part_id(state: DesignState, part_type: PartType) -> str:
        existing = {p.id for p in state.parts}
        n = sum(1 for p in state.parts if p.part_type is part_type) + 1
        while f"{part_type.value}-{n}" in existing:
            n += 1
        return f"{part_type.value}-{n}"

    @staticmethod
    def _hardware(state: DesignState) -> SpaceHardwareService:
        return SpaceHardwareService(state.tolerances, state.custom_space_part_types)

    @staticmethod
    def _with_space_parts(
        state: DesignState, space_parts: tuple[SpacePart, ...]
    ) -> EditResult:
        if space_parts == state.space_parts:
            return EditResult(state, False)
        return EditResult(replace(state, space_parts=space_parts), True)
