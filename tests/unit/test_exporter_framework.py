"""Tests for the exporter framework and the registered exporters."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import ClassVar

import pytest

from kitchen_planner.application import GenerateReportCommand, ProjectReportOutput
from kitchen_planner.domain import Project
from kitchen_planner.infrastructure.exporters import (
    BomExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    ReportJsonExporter,
)


@pytest.fixture
def report(project: Project) -> ProjectReportOutput:
    return GenerateReportCommand().execute(project)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        """Store original exporters before each test."""
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        """Restore original exporters after each test."""
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_exporters_registered(self) -> None:
        assert ExporterRegistry.get("bom") is BomExporter
        assert ExporterRegistry.get("json") is ReportJsonExporter
        assert ExporterRegistry.available_formats() == ["bom", "json"]

    def test_get_unknown_format_raises_key_error(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("dxf")
        assert "No exporter registered for format 'dxf'" in str(exc_info.value)
        assert "bom, json" in str(exc_info.value)

    def test_register_new_exporter(self) -> None:
        @ExporterRegistry.register("test_format")
        class TestExporter:
            format_name: ClassVar[str] = "test_format"
            file_extension: ClassVar[str] = "test"

            def export(self, output, path: Path) -> None:
                pass

        assert ExporterRegistry.is_registered("test_format")
        assert ExporterRegistry.get("test_format") is TestExporter

    def test_clear_removes_all_exporters(self) -> None:
        ExporterRegistry.clear()
        assert ExporterRegistry.available_formats() == []

    def test_exporters_satisfy_protocol(self) -> None:
        assert isinstance(BomExporter(), Exporter)
        assert isinstance(ReportJsonExporter(), Exporter)


class TestBomExporter:
    def test_file_extension_follows_format(self) -> None:
        assert BomExporter().file_extension == "txt"
        assert BomExporter(output_format="csv").file_extension == "csv"
        assert BomExporter(output_format="json").file_extension == "json"

    def test_unknown_format_rejected(self) -> None:
        with pytest.raises(ValueError):
            BomExporter(output_format="xlsx")

    def test_text(self, report: ProjectReportOutput) -> None:
        output = BomExporter().export_string(report)
        assert "CUT LIST" in output
        assert "HARDWARE" in output

    def test_csv_rows(self, report: ProjectReportOutput) -> None:
        rows = list(csv.reader(io.StringIO(BomExporter(output_format="csv").export_string(report))))

        assert rows[0][:3] == ["cabinet", "label", "part"]
        panel_count = sum(len(g.items) for g in report.bom.groups)
        panels = rows[1 : panel_count + 1]
        assert panels[0][:3] == ["WALL_A - #1 Base 2-Door (600mm)", "#1 Base 2-Door", "Side Panel"]

        hardware = rows[panel_count + 1 : -1]
        assert [row[2] for row in hardware] == sorted(report.bom.hardware_summary)
        hinge = next(row for row in hardware if row[2] == "Soft-Close Hinge")
        assert hinge == ["HARDWARE", "", "Soft-Close Hinge", "8", "0", "0", "Hardware", "0.000"]

        assert rows[-1][0] == "TOTAL"
        assert rows[-1][-1] == f"{report.bom.total_area:.2f}"

    def test_json(self, report: ProjectReportOutput) -> None:
        data = json.loads(BomExporter(output_format="json").export_string(report))

        assert data["total_area"] == report.bom.total_area
        assert data["hardware_summary"] == report.bom.hardware_summary
        assert data["groups"][1]["cabinet_name"] == "WALL_A - #2 Base 3-Drawer (450mm)"

    def test_export_writes_file(self, report: ProjectReportOutput, tmp_path: Path) -> None:
        path = tmp_path / "bom.csv"
        BomExporter(output_format="csv").export(report, path)
        assert path.read_text().startswith("cabinet,label,part")


class TestReportJsonExporter:
    def test_export(self, report: ProjectReportOutput, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        ReportJsonExporter().export(report, path)

        data = json.loads(path.read_text())
        assert set(data) == {"project", "zones", "bom"}


class TestExportManager:
    def test_export_all(self, report: ProjectReportOutput, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"

        results = ExportManager(out_dir).export_all(["bom", "json"], report, "galley")

        assert results == {
            "bom": out_dir / "galley_bom.txt",
            "json": out_dir / "galley_json.json",
        }
        assert all(path.exists() for path in results.values())

    def test_export_single(self, report: ProjectReportOutput, tmp_path: Path) -> None:
        path = ExportManager(tmp_path).export_single("json", report)
        assert path == tmp_path / "kitchen_json.json"

    def test_unknown_format_writes_nothing(
        self, report: ProjectReportOutput, tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "out"
        with pytest.raises(KeyError):
            ExportManager(out_dir).export_all(["bom", "stl"], report)
        assert not out_dir.exists()
