"""Domain services for cabinet geometry.

This package provides the pure computations derived from a part list:
- Template generation of compartment/shelf cabinets
- Collision detection and edit gating
- Space decomposition of the interior
- Connector placement at panel junctions
- Borehole aggregation and per-part hole assembly
- Fitting hardware into spaces
"""

from .borehole_aggregator import BoreholeAggregator, PartHoleAssembler
from .collision import CollisionDetector, EditCheck, boxes_overlap, is_valid_adjacency
from .connector_placer import (
    ConnectorPlacer,
    connector_count,
    connector_depths,
    connector_id,
)
from .space_decomposer import SpaceDecomposer
from .space_hardware import SpaceHardwareService
from .template_generator import TemplateConfig, TemplateGenerator, generate_cabinet

__all__ = [
    "BoreholeAggregator",
    "CollisionDetector",
    "ConnectorPlacer",
    "EditCheck",
    "PartHoleAssembler",
    "SpaceDecomposer",
    "SpaceHardwareService",
    "TemplateConfig",
    "TemplateGenerator",
    "boxes_overlap",
    "connector_count",
    "connector_depths",
    "connector_id",
    "generate_cabinet",
    "is_valid_adjacency",
]
