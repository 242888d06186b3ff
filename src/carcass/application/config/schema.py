"""Pydantic schema models for persisted design documents.

A design document is the JSON form of a cabinet design: the part list,
room and cabinet placement, fitted hardware, connector offsets and the
connector pattern and tolerances. Keys follow the editor's camelCase
convention; snake_case field names are accepted as well.

The PartType and HoleFace enums are reused from the domain layer to ensure
consistency and avoid duplication.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from carcass.domain.value_objects import HoleFace, PartType

# Supported schema versions for design documents
# Version 1.0: Parts, room and cabinet placement
# Version 1.1: Added fitted hardware, connector offsets, pattern and tolerances
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})
CURRENT_VERSION = "1.1"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(word.capitalize() for word in rest)


class _DocumentModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid", alias_generator=_camel, populate_by_name=True
    )


class PartConfig(_DocumentModel):
    """Configuration for a single part.

    Attributes:
        id: Unique part identifier.
        type: Part type tag (leftPanel, shelf, door, ...).
        x: Left edge in millimetres.
        y: Bottom edge in millimetres.
        z: Back edge in millimetres.
        w: Width, must be positive.
        h: Height, must be positive.
        d: Depth, must be positive.
        rotation: Rotation in degrees.
        open_angle: Door opening angle in degrees.
        is_shared: Whether a divider is shared by two compartments.
    """

    id: str = Field(..., min_length=1)
    type: PartType
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = Field(..., gt=0)
    h: float = Field(..., gt=0)
    d: float = Field(..., gt=0)
    rotation: float = 0.0
    open_angle: float | None = None
    is_shared: bool | None = None


class RoomConfig(_DocumentModel):
    """Room the cabinet is placed in.

    Attributes:
        width: Room width in millimetres.
        height: Room height in millimetres.
        depth: Room depth in millimetres.
        floor_color: Floor color hint.
        wall_color: Wall color hint.
        elements: Windows, doors and lights, carried through unchanged.
    """

    width: float = Field(default=4000.0, gt=0)
    height: float = Field(default=2800.0, gt=0)
    depth: float = Field(default=3500.0, gt=0)
    floor_color: str = "#E8DCC8"
    wall_color: str = "#F5F5F5"
    elements: list[dict[str, Any]] = Field(default_factory=list)


class CabinetPlacementConfig(_DocumentModel):
    """Cabinet origin inside the room."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class SpacePartBoreholeConfig(_DocumentModel):
    """A borehole of fitted hardware, with its drag offset."""

    id: str
    x: float
    y: float
    z: float = 0.0
    side: HoleFace
    offset_x: float = 0.0
    offset_y: float = 0.0


class SpacePartConfig(_DocumentModel):
    """Hardware fitted into a space."""

    id: str
    space_id: str
    type_id: str
    type_name: str = ""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    max_width: float = Field(..., gt=0)
    max_height: float = Field(..., gt=0)
    max_depth: float = Field(..., gt=0)
    color: str = "#808080"
    boreholes: list[SpacePartBoreholeConfig] = Field(default_factory=list)


class BoreholeTemplateConfig(_DocumentModel):
    """Borehole position of a custom hardware type."""

    x: float
    y: float
    z: float = 0.0
    side: HoleFace


class SpacePartTypeConfig(_DocumentModel):
    """User-defined hardware type."""

    id: str = Field(..., min_length=1)
    name: str
    max_width: float = Field(..., gt=0)
    max_height: float = Field(..., gt=0)
    max_depth: float = Field(..., gt=0)
    color: str = "#808080"
    boreholes: list[BoreholeTemplateConfig] = Field(default_factory=list)


class OffsetConfig(_DocumentModel):
    """Drag offset of a connector."""

    x: float = 0.0
    y: float = 0.0


class ConnectorPatternConfig(_DocumentModel):
    """Global connector pattern.

    Attributes:
        spacing: Requested distance between connectors (must be positive).
        edge_offset: Distance of the outer connectors from the joint ends.
        offset_x: Pattern-wide horizontal adjustment.
        offset_y: Pattern-wide vertical adjustment.
    """

    spacing: float = Field(default=200.0, gt=0)
    edge_offset: float = Field(default=32.0, ge=0)
    offset_x: float = 0.0
    offset_y: float = 0.0


class TolerancesConfig(_DocumentModel):
    """Geometric tolerances in millimetres."""

    adjacency_epsilon: float = Field(default=2.0, gt=0)
    junction_tolerance: float = Field(default=30.0, gt=0)
    min_space_size: float = Field(default=10.0, gt=0)
    space_part_margin: float = Field(default=20.0, ge=0)


class TemplateConfigSchema(_DocumentModel):
    """Parameters of a generated compartment/shelf cabinet."""

    width: float = Field(default=600.0, gt=0)
    height: float = Field(default=720.0, gt=0)
    depth: float = Field(default=560.0, gt=0)
    compartments: int = Field(default=1, ge=1, le=20)
    shelves: int = Field(default=1, ge=0, le=50)
    share_walls: bool = True


class DesignDocument(_DocumentModel):
    """Root model of a persisted design.

    Attributes:
        schema_version: Version string in format "major.minor".
        name: Design name.
        parts: Part list. May be empty, in which case loading keeps the
            current parts.
        room: Optional room geometry.
        cabinet_position: Optional cabinet placement inside the room.
        space_parts: Hardware fitted into spaces.
        custom_space_part_types: User-defined hardware types.
        connector_offsets: Per-connector drag offsets keyed by connector id.
        pattern: Optional connector pattern (defaults apply when omitted).
        tolerances: Optional tolerances (defaults apply when omitted).
        version: Editor payload version, accepted for compatibility.

    Example:
        >>> doc = DesignDocument(
        ...     schema_version="1.1",
        ...     parts=[PartConfig(id="left", type="leftPanel", w=18, h=720, d=554)],
        ... )
    """

    schema_version: str = Field(default=CURRENT_VERSION, pattern=r"^\d+\.\d+$")
    name: str = "New Cabinet Design"
    parts: list[PartConfig] = Field(default_factory=list)
    room: RoomConfig | None = Field(default=None, description="Room geometry")
    cabinet_position: CabinetPlacementConfig | None = None
    space_parts: list[SpacePartConfig] = Field(default_factory=list)
    custom_space_part_types: list[SpacePartTypeConfig] = Field(default_factory=list)
    connector_offsets: dict[str, OffsetConfig] = Field(default_factory=dict)
    pattern: ConnectorPatternConfig | None = None
    tolerances: TolerancesConfig | None = None
    version: int | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "DesignDocument":
        """Part ids and space part ids must be unique."""
        part_ids = [p.id for p in self.parts]
        duplicates = sorted({i for i in part_ids if part_ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate part ids: {', '.join(duplicates)}")

        space_part_ids = [sp.id for sp in self.space_parts]
        duplicates = sorted({i for i in space_part_ids if space_part_ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate space part ids: {', '.join(duplicates)}")
        return self
