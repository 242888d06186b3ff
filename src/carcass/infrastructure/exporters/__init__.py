"""Exporter framework for derived design output.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- json: Parts with holes, spaces, connectors, boreholes and collisions
- drill: CSV drill list, one row per hole in part coordinates

Usage:
    from carcass.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["json", "drill"], design_output, project_name="kitchen")
"""

from carcass.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from carcass.infrastructure.exporters.drill import DRILL_COLUMNS, DrillListExporter
from carcass.infrastructure.exporters.json_exporter import (
    JsonDesignExporter,
    output_to_dict,
)

__all__ = [
    "DRILL_COLUMNS",
    "DrillListExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonDesignExporter",
    "output_to_dict",
]
