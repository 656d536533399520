"""Exporter framework for project reports.

Registered exporters:
- bom: Bill of materials as text, csv or json
- json: Zone layouts and bill of materials as one JSON document

Usage:
    from kitchen_planner.infrastructure.exporters import ExportManager, ExporterRegistry

    bom_exporter = ExporterRegistry.get("bom")(output_format="csv")
    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["bom", "json"], report, project_name="my_kitchen")
"""

from kitchen_planner.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from kitchen_planner.infrastructure.exporters.bom import BOM_FORMATS, BomExporter
from kitchen_planner.infrastructure.exporters.report_json import ReportJsonExporter

__all__ = [
    "BOM_FORMATS",
    "BomExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "ReportJsonExporter",
]
