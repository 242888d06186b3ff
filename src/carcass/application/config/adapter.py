"""Adapter between design documents and the application state.

Converts the Pydantic document models into domain objects and a
``DesignState`` and back, and template parameters into the domain
``TemplateConfig``.
"""

from carcass.application.config.schema import (
    CURRENT_VERSION,
    BoreholeTemplateConfig,
    CabinetPlacementConfig,
    ConnectorPatternConfig,
    DesignDocument,
    OffsetConfig,
    PartConfig,
    RoomConfig,
    SpacePartBoreholeConfig,
    SpacePartConfig,
    SpacePartTypeConfig,
    TemplateConfigSchema,
    TolerancesConfig,
)
from carcass.application.state import DesignState, Room
from carcass.domain import (
    BoreholeTemplate,
    ConnectorPattern,
    Offset2D,
    Part,
    SpacePart,
    SpacePartBorehole,
    SpacePartType,
    TemplateConfig,
    Tolerances,
    Vector3,
)


def config_to_part(config: PartConfig) -> Part:
    return Part(
        id=config.id,
        part_type=config.type,
        x=config.x,
        y=config.y,
        z=config.z,
        w=config.w,
        h=config.h,
        d=config.d,
        rotation=config.rotation,
        open_angle=config.open_angle,
        is_shared=config.is_shared,
    )


def part_to_config(part: Part) -> PartConfig:
    return PartConfig(
        id=part.id,
        type=part.part_type,
        x=part.x,
        y=part.y,
        z=part.z,
        w=part.w,
        h=part.h,
        d=part.d,
        rotation=part.rotation,
        open_angle=part.open_angle,
        is_shared=part.is_shared,
    )


def config_to_room(config: RoomConfig) -> Room:
    return Room(
        width=config.width,
        height=config.height,
        depth=config.depth,
        floor_color=config.floor_color,
        wall_color=config.wall_color,
        elements=tuple(dict(element) for element in config.elements),
    )


def config_to_space_part(config: SpacePartConfig) -> SpacePart:
    return SpacePart(
        id=config.id,
        space_id=config.space_id,
        type_id=config.type_id,
        type_name=config.type_name,
        x=config.x,
        y=config.y,
        z=config.z,
        width=config.width,
        height=config.height,
        depth=config.depth,
        max_width=config.max_width,
        max_height=config.max_height,
        max_depth=config.max_depth,
        color=config.color,
        boreholes=tuple(
            SpacePartBorehole(
                id=bh.id,
                x=bh.x,
                y=bh.y,
                z=bh.z,
                side=bh.side,
                offset_x=bh.offset_x,
                offset_y=bh.offset_y,
            )
            for bh in config.boreholes
        ),
    )


def space_part_to_config(space_part: SpacePart) -> SpacePartConfig:
    return SpacePartConfig(
        id=space_part.id,
        space_id=space_part.space_id,
        type_id=space_part.type_id,
        type_name=space_part.type_name,
        x=space_part.x,
        y=space_part.y,
        z=space_part.z,
        width=space_part.width,
        height=space_part.height,
        depth=space_part.depth,
        max_width=space_part.max_width,
        max_height=space_part.max_height,
        max_depth=space_part.max_depth,
        color=space_part.color,
        boreholes=[
            SpacePartBoreholeConfig(
                id=bh.id,
                x=bh.x,
                y=bh.y,
                z=bh.z,
                side=bh.side,
                offset_x=bh.offset_x,
                offset_y=bh.offset_y,
            )
            for bh in space_part.boreholes
        ],
    )


def config_to_space_part_type(config: SpacePartTypeConfig) -> SpacePartType:
    return SpacePartType(
        id=config.id,
        name=config.name,
        max_width=config.max_width,
        max_height=config.max_height,
        max_depth=config.max_depth,
        color=config.color,
        boreholes=tuple(
            BoreholeTemplate(x=bh.x, y=bh.y, side=bh.side, z=bh.z)
            for bh in config.boreholes
        ),
    )


def config_to_pattern(config: ConnectorPatternConfig) -> ConnectorPattern:
    return ConnectorPattern(
        spacing=config.spacing,
        edge_offset=config.edge_offset,
        offset_x=config.offset_x,
        offset_y=config.offset_y,
    )


def config_to_tolerances(config: TolerancesConfig) -> Tolerances:
    return Tolerances(
        adjacency_epsilon=config.adjacency_epsilon,
        junction_tolerance=config.junction_tolerance,
        min_space_size=config.min_space_size,
        space_part_margin=config.space_part_margin,
    )


def config_to_template(config: TemplateConfigSchema) -> TemplateConfig:
    """Convert validated template parameters to the domain template."""
    return TemplateConfig(
        width=config.width,
        height=config.height,
        depth=config.depth,
        compartments=config.compartments,
        shelves_per_compartment=config.shelves,
        share_walls=config.share_walls,
    )


def document_to_state(
    document: DesignDocument, base: DesignState | None = None
) -> DesignState:
    """Build a design state from a document.

    Sections missing from the document keep the values of ``base`` (a fresh
    editor state by default). A document with an empty part list keeps the
    base parts and their history; otherwise history restarts at the loaded
    parts.

    Args:
        document: Validated design document.
        base: State to load over.

    Returns:
        New DesignState.
    """
    base = base or DesignState.initial()

    if document.parts:
        parts = tuple(config_to_part(p) for p in document.parts)
        history: tuple[tuple[Part, ...], ...] = (parts,)
        history_index = 0
    else:
        parts, history, history_index = base.parts, base.history, base.history_index

    return DesignState(
        parts=parts,
        history=history,
        history_index=history_index,
        space_parts=tuple(config_to_space_part(sp) for sp in document.space_parts),
        connector_offsets={
            connector_id: Offset2D(offset.x, offset.y)
            for connector_id, offset in document.connector_offsets.items()
        },
        pattern=(
            config_to_pattern(document.pattern) if document.pattern else base.pattern
        ),
        tolerances=(
            config_to_tolerances(document.tolerances)
            if document.tolerances
            else base.tolerances
        ),
        custom_space_part_types=tuple(
            config_to_space_part_type(t) for t in document.custom_space_part_types
        ),
        design_name=document.name,
        room=config_to_room(document.room) if document.room else base.room,
        cabinet_position=(
            Vector3(
                document.cabinet_position.x,
                document.cabinet_position.y,
                document.cabinet_position.z,
            )
            if document.cabinet_position
            else base.cabinet_position
        ),
    )


def state_to_document(state: DesignState) -> DesignDocument:
    """Serialize a design state to a document of the current schema version."""
    return DesignDocument(
        schema_version=CURRENT_VERSION,
        name=state.design_name,
        parts=[part_to_config(p) for p in state.parts],
        room=RoomConfig(
            width=state.room.width,
            height=state.room.height,
            depth=state.room.depth,
            floor_color=state.room.floor_color,
            wall_color=state.room.wall_color,
            elements=[dict(element) for element in state.room.elements],
        ),
        cabinet_position=CabinetPlacementConfig(
            x=state.cabinet_position.x,
            y=state.cabinet_position.y,
            z=state.cabinet_position.z,
        ),
        space_parts=[space_part_to_config(sp) for sp in state.space_parts],
        custom_space_part_types=[
            SpacePartTypeConfig(
                id=t.id,
                name=t.name,
                max_width=t.max_width,
                max_height=t.max_height,
                max_depth=t.max_depth,
                color=t.color,
                boreholes=[
                    BoreholeTemplateConfig(x=bh.x, y=bh.y, z=bh.z, side=bh.side)
                    for bh in t.boreholes
                ],
            )
            for t in state.custom_space_part_types
        ],
        connector_offsets={
            connector_id: OffsetConfig(x=offset.x, y=offset.y)
            for connector_id, offset in state.connector_offsets.items()
        },
        pattern=ConnectorPatternConfig(
            spacing=state.pattern.spacing,
            edge_offset=state.pattern.edge_offset,
            offset_x=state.pattern.offset_x,
            offset_y=state.pattern.offset_y,
        ),
        tolerances=TolerancesConfig(
            adjacency_epsilon=state.tolerances.adjacency_epsilon,
            junction_tolerance=state.tolerances.junction_tolerance,
            min_space_size=state.tolerances.min_space_size,
            space_part_margin=state.tolerances.space_part_margin,
        ),
    )
