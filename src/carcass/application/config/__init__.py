"""Design document schema and loading.

This package provides JSON-based loading and validation of persisted
design documents. It includes Pydantic models for schema validation, a
loader with comprehensive error handling, and an adapter to and from the
application's DesignState.

Public API:
    - DesignDocument: Root document model
    - PartConfig: Part model
    - RoomConfig: Room geometry model
    - SpacePartConfig: Fitted hardware model
    - ConnectorPatternConfig: Connector pattern model
    - TolerancesConfig: Tolerances model
    - TemplateConfigSchema: Template parameters model
    - load_design: Load a document from a JSON file
    - load_design_from_dict: Load a document from a dictionary
    - ConfigError: Exception for document errors
    - document_to_state / state_to_document: Convert to and from state
    - config_to_template: Convert template parameters to the domain template

Example:
    >>> from pathlib import Path
    >>> from carcass.application.config import load_design, ConfigError
    >>>
    >>> try:
    ...     document = load_design(Path("my-cabinet.json"))
    ...     print(f"{document.name}: {len(document.parts)} parts")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from carcass.application.config.adapter import (
    config_to_template,
    document_to_state,
    state_to_document,
)
from carcass.application.config.loader import (
    ConfigError,
    design_to_json,
    load_design,
    load_design_from_dict,
    load_template_from_dict,
)
from carcass.application.config.schema import (
    CURRENT_VERSION,
    SUPPORTED_VERSIONS,
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

__all__ = [
    "BoreholeTemplateConfig",
    "CURRENT_VERSION",
    "CabinetPlacementConfig",
    "ConfigError",
    "ConnectorPatternConfig",
    "DesignDocument",
    "OffsetConfig",
    "PartConfig",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "SpacePartBoreholeConfig",
    "SpacePartConfig",
    "SpacePartTypeConfig",
    "TemplateConfigSchema",
    "TolerancesConfig",
    "config_to_template",
    "design_to_json",
    "document_to_state",
    "load_design",
    "load_design_from_dict",
    "load_template_from_dict",
    "state_to_document",
]
