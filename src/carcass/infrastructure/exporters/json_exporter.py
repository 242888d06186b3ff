"""JSON exporter for the complete derived design output.

Exports:
- Parts with the holes drilled into each one
- Spaces
- Connectors with their front and side holes
- The aggregated absolute-coordinate borehole list
- Conflicting collisions

Every float is rounded to one decimal place.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from carcass.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from carcass.application.dtos import DesignOutput


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def _normalize(value: Any, precision: int) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool) or value is None or isinstance(value, (int, str)):
        return value
    if isinstance(value, float):
        rounded = round(value, precision)
        # Avoid "-0.0" in the output
        return 0.0 if rounded == 0 else rounded
    if is_dataclass(value) and not isinstance(value, type):
        return _normalize(asdict(value), precision)
    if isinstance(value, dict):
        return {str(k): _normalize(v, precision) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v, precision) for v in value]
    return str(value)


def output_to_dict(output: DesignOutput, precision: int = 1) -> dict[str, Any]:
    """Convert design output to a JSON-ready dictionary.

    Args:
        output: Derived design output.
        precision: Decimal places kept for floats.

    Returns:
        Dictionary with ``summary``, ``parts``, ``spaces``, ``connectors``,
        ``boreholes`` and ``collisions`` keys.
    """
    parts = []
    for entry in output.parts_with_holes:
        part = _normalize(entry.part, precision)
        part["name"] = entry.part.display_name
        part["holes"] = _normalize(entry.holes, precision)
        parts.append(part)

    connectors = []
    for connector in output.connectors:
        data = _normalize(connector, precision)
        data["type"] = connector.connector_type
        connectors.append(data)

    collisions = []
    for record in output.collisions:
        data = _normalize(record, precision)
        data["message"] = record.describe(record.part_a)
        collisions.append(data)

    return {
        "schema_version": SCHEMA_VERSION,
        "summary": output.summary(),
        "parts": parts,
        "spaces": _normalize(output.spaces, precision),
        "connectors": connectors,
        "boreholes": _normalize(output.boreholes, precision),
        "collisions": collisions,
    }


@ExporterRegistry.register("json")
class JsonDesignExporter:
    """JSON exporter for the derived design output.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, precision: int = 1, indent: int = 2) -> None:
        self.precision = precision
        self.indent = indent

    def export(self, output: DesignOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported design JSON to {path}")

    def export_string(self, output: DesignOutput) -> str:
        return json.dumps(output_to_dict(output, self.precision), indent=self.indent)
