"""Infrastructure layer: text formatters and file exporters."""

from kitchen_planner.infrastructure.exporters import (
    BOM_FORMATS,
    BomExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    ReportJsonExporter,
)
from kitchen_planner.infrastructure.formatters import (
    CutListFormatter,
    HardwareSummaryFormatter,
    PlacementTableFormatter,
    ReportJsonFormatter,
    ZoneElevationFormatter,
    bom_to_dict,
)

__all__ = [
    "BOM_FORMATS",
    "BomExporter",
    "CutListFormatter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "HardwareSummaryFormatter",
    "PlacementTableFormatter",
    "ReportJsonExporter",
    "ReportJsonFormatter",
    "ZoneElevationFormatter",
    "bom_to_dict",
]
