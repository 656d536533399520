"""Full project report exporter (zone layouts plus BOM) as JSON."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from kitchen_planner.infrastructure.exporters.base import ExporterRegistry
from kitchen_planner.infrastructure.formatters import ReportJsonFormatter

if TYPE_CHECKING:
    from kitchen_planner.application.dtos import ProjectReportOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class ReportJsonExporter:
    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: ProjectReportOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported project report to {path}")

    def export_string(self, output: ProjectReportOutput) -> str:
        return ReportJsonFormatter().format(output, indent=self.indent)
