"""Drill list exporter.

Writes one CSV row per hole attached to a part, in part-local coordinates,
together with the machining face code of the drilled face. Holes are listed
part by part in part-list order.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from carcass.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from carcass.application.dtos import DesignOutput


logger = logging.getLogger(__name__)

DRILL_COLUMNS = (
    "part_id",
    "part_type",
    "hole_id",
    "kind",
    "face",
    "face_code",
    "x",
    "y",
    "diameter",
    "depth",
)


def _mm(value: float) -> str:
    return f"{value:.1f}"


@ExporterRegistry.register("drill")
class DrillListExporter:
    """CSV drill list for manufacturing.

    Attributes:
        format_name: "drill"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "drill"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: DesignOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported drill list to {path}")

    def export_string(self, output: DesignOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(DRILL_COLUMNS)

        rows = 0
        for entry in output.parts_with_holes:
            for hole in entry.holes:
                writer.writerow(
                    [
                        entry.part.id,
                        entry.part.part_type.value,
                        hole.id,
                        hole.kind.value,
                        hole.face.value,
                        hole.face.face_code,
                        _mm(hole.x),
                        _mm(hole.y),
                        _mm(hole.diameter),
                        _mm(hole.depth),
                    ]
                )
                rows += 1

        logger.debug(f"Drill list has {rows} holes")
        return buffer.getvalue()
