"""Bill of materials exporter.

Output formats: text (cut list plus hardware summary), csv and json.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from kitchen_planner.domain.services.bom_expansion import HARDWARE_MATERIAL
from kitchen_planner.domain.value_objects import BOMReport, format_mm
from kitchen_planner.infrastructure.exporters.base import ExporterRegistry
from kitchen_planner.infrastructure.formatters import (
    CutListFormatter,
    HardwareSummaryFormatter,
    bom_to_dict,
)

if TYPE_CHECKING:
    from kitchen_planner.application.dtos import ProjectReportOutput


logger = logging.getLogger(__name__)

BOM_FORMATS = ("text", "csv", "json")

CSV_HEADER = [
    "cabinet",
    "label",
    "part",
    "qty",
    "width_mm",
    "length_mm",
    "material",
    "area_m2",
]


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomExporter:
    """Exports the aggregated BOM of a project report.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" depending on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "text") -> None:
        if output_format not in BOM_FORMATS:
            raise ValueError(
                f"Unknown BOM format '{output_format}'. "
                f"Expected one of: {', '.join(BOM_FORMATS)}"
            )
        self.output_format = output_format
        self._file_extension = {"text": "txt", "csv": "csv", "json": "json"}[output_format]

    @property
    def file_extension(self) -> str:
        return self._file_extension

    def export(self, output: ProjectReportOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: ProjectReportOutput) -> str:
        return self.format(output.bom)

    def format(self, report: BOMReport) -> str:
        if self.output_format == "csv":
            return self.format_csv(report)
        if self.output_format == "json":
            return self.format_json(report)
        return self.format_text(report)

    def format_text(self, report: BOMReport) -> str:
        return "\n\n".join(
            [
                CutListFormatter().format(report),
                HardwareSummaryFormatter().format(report),
            ]
        ) + "\n"

    def format_csv(self, report: BOMReport) -> str:
        """One row per panel, then one per hardware item, then a TOTAL row.

        Hardware rows have zero dimensions and the "Hardware" material.
        The TOTAL row carries only the rounded project area.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)
        for group in report.groups:
            for item in group.items:
                writer.writerow(
                    [
                        group.cabinet_name,
                        item.label,
                        item.name,
                        item.qty,
                        format_mm(item.width),
                        format_mm(item.length),
                        item.material,
                        f"{item.area_m2:.3f}",
                    ]
                )
        for name, qty in sorted(report.hardware_summary.items()):
            writer.writerow(["HARDWARE", "", name, qty, 0, 0, HARDWARE_MATERIAL, "0.000"])
        writer.writerow(["TOTAL", "", "", "", "", "", "", f"{report.total_area:.2f}"])
        return buffer.getvalue()

    def format_json(self, report: BOMReport) -> str:
        return json.dumps(bom_to_dict(report), indent=2)
