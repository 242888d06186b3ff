"""Domain layer - cabinet geometry core."""

from .catalog import (
    PART_CATALOG,
    SPACE_PART_TYPES,
    BoreholeTemplate,
    PartTypeInfo,
    SpacePartType,
    find_space_part_type,
    lookup_part_type,
)
from .entities import (
    Borehole,
    CollisionRecord,
    Connector,
    Hole,
    Part,
    PartHole,
    PartWithHoles,
    Space,
    SpacePart,
    SpacePartBorehole,
)
from .services import (
    BoreholeAggregator,
    CollisionDetector,
    ConnectorPlacer,
    EditCheck,
    PartHoleAssembler,
    SpaceDecomposer,
    SpaceHardwareService,
    TemplateConfig,
    TemplateGenerator,
    boxes_overlap,
    connector_count,
    connector_depths,
    connector_id,
    generate_cabinet,
    is_valid_adjacency,
)
from .value_objects import (
    BoreholeSource,
    ConnectorPattern,
    HoleFace,
    HoleKind,
    JunctionSide,
    Offset2D,
    PartType,
    Tolerances,
    Vector3,
)

__all__ = [
    "PART_CATALOG",
    "SPACE_PART_TYPES",
    "Borehole",
    "BoreholeAggregator",
    "BoreholeSource",
    "BoreholeTemplate",
    "CollisionDetector",
    "CollisionRecord",
    "Connector",
    "ConnectorPattern",
    "ConnectorPlacer",
    "EditCheck",
    "Hole",
    "HoleFace",
    "HoleKind",
    "JunctionSide",
    "Offset2D",
    "Part",
    "PartHole",
    "PartHoleAssembler",
    "PartType",
    "PartTypeInfo",
    "PartWithHoles",
    "Space",
    "SpaceDecomposer",
    "SpaceHardwareService",
    "SpacePart",
    "SpacePartBorehole",
    "SpacePartType",
    "TemplateConfig",
    "TemplateGenerator",
    "Tolerances",
    "Vector3",
    "boxes_overlap",
    "connector_count",
    "connector_depths",
    "connector_id",
    "find_space_part_type",
    "generate_cabinet",
    "is_valid_adjacency",
    "lookup_part_type",
]
