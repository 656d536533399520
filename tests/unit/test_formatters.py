"""Tests for the text formatters."""

from __future__ import annotations

import json

from kitchen_planner.application import GenerateReportCommand
from kitchen_planner.domain import (
    BOMReport,
    CabinetPreset,
    CabinetUnit,
    Project,
    Zone,
    ZoneId,
    ZoneLayoutService,
    auto_fill_zone,
    generate_project_bom,
)
from kitchen_planner.infrastructure import (
    CutListFormatter,
    HardwareSummaryFormatter,
    PlacementTableFormatter,
    ReportJsonFormatter,
    ZoneElevationFormatter,
)


class TestCutListFormatter:
    def test_lists_groups_and_total(self, project: Project) -> None:
        output = CutListFormatter().format(generate_project_bom(project))

        assert output.startswith("CUT LIST")
        assert "WALL_A - #1 Base 2-Door (600mm)" in output
        assert "WALL_A - #2 Base 3-Drawer (450mm)" in output
        assert "Drawer Bottom" in output
        assert "TOTAL" in output
        assert "Soft-Close Hinge" not in output

    def test_subtotal_per_cabinet(self, project: Project) -> None:
        report = generate_project_bom(project)
        output = CutListFormatter().format(report)

        subtotals = [line.split()[-1] for line in output.splitlines() if line.strip().startswith("Subtotal")]
        assert subtotals == [f"{group.area_m2:.3f}" for group in report.groups]

    def test_filler_subtotal(self) -> None:
        project = Project.new()
        project.zone(ZoneId.WALL_A).add_cabinet(CabinetUnit.for_preset(CabinetPreset.FILLER, 100))

        output = CutListFormatter().format(generate_project_bom(project))

        assert "  Subtotal" in output
        assert output.splitlines()[-3].split() == ["Subtotal", "0.072"]

    def test_empty_report(self) -> None:
        assert CutListFormatter().format(BOMReport()) == "No cabinets in active zones."


class TestHardwareSummaryFormatter:
    def test_sorted_by_name(self, project: Project) -> None:
        output = HardwareSummaryFormatter().format(generate_project_bom(project))
        names = [
            line.strip().rsplit(" ", 1)[0].strip()
            for line in output.splitlines()[2:-2]
        ]
        assert names == sorted(names)
        assert "Adjustable Leg" in names

    def test_totals(self) -> None:
        report = BOMReport(hardware_summary={"Soft-Close Hinge": 4, "Handle/Knob": 2})
        output = HardwareSummaryFormatter().format(report)
        assert output.splitlines()[-1].split() == ["TOTAL", "6"]

    def test_no_hardware(self) -> None:
        assert "No hardware required." in HardwareSummaryFormatter().format(BOMReport())


class TestPlacementTableFormatter:
    def test_rows_and_notes(self, door_zone: Zone) -> None:
        layout = ZoneLayoutService().layout(auto_fill_zone(door_zone))
        output = PlacementTableFormatter().format(layout)

        assert output.startswith("WALL_A (3000mm)")
        assert "Wall Standard" in output
        assert "auto" in output
        assert "past wall end" in output
        assert "Obstacles:" in output
        assert "door" in output

    def test_empty_zone(self) -> None:
        layout = ZoneLayoutService().layout(Zone(id=ZoneId.ISLAND, total_length=2400))
        assert "(no cabinets)" in PlacementTableFormatter().format(layout)


class TestZoneElevationFormatter:
    def test_strip_shows_obstacle_and_cabinets(self, door_zone: Zone) -> None:
        door_zone.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600))
        layout = ZoneLayoutService().layout(door_zone)

        lines = ZoneElevationFormatter(width=30).format(layout).splitlines()

        assert lines[0] == "WALL_A elevation (1 char = 100mm)"
        obstacles = lines[1][len("obstacles |"):]
        cabinets = lines[2][len("cabinets  |"):]
        assert obstacles[10:19] == "#" * 9
        assert cabinets[:6] == "[====="
        assert cabinets[6:10] == "...."

    def test_auto_filled_drawn_differently(self) -> None:
        zone = Zone(
            id=ZoneId.WALL_B,
            total_length=1000,
            cabinets=[CabinetUnit.for_preset(CabinetPreset.FILLER, 1000, is_auto_filled=True)],
        )
        output = ZoneElevationFormatter(width=10).format(ZoneLayoutService().layout(zone))
        assert "|[~~~~~~~~~|" in output

    def test_overflow_drawn_past_wall_end(self) -> None:
        zone = Zone(
            id=ZoneId.WALL_C,
            total_length=1000,
            cabinets=[CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 2000)],
        )
        cabinets = ZoneElevationFormatter(width=20).format(
            ZoneLayoutService().layout(zone)
        ).splitlines()[2]
        assert cabinets == "cabinets  |[=========|=========="

    def test_empty_wall(self) -> None:
        layout = ZoneLayoutService().layout(Zone(id=ZoneId.WALL_A, total_length=0))
        assert ZoneElevationFormatter().format(layout) == "WALL_A: empty wall"


class TestReportJsonFormatter:
    def test_structure(self, project: Project) -> None:
        output = GenerateReportCommand().execute(project)
        data = json.loads(ReportJsonFormatter().format(output))

        assert data["project"]["name"] == "Test Kitchen"
        assert [z["id"] for z in data["zones"]] == ["WALL_A"]
        placements = data["zones"][0]["placements"]
        assert [p["start"] for p in placements] == [0, 600, 1050]
        assert placements[0]["preset"] == "Base 2-Door"
        assert len(data["bom"]["groups"]) == 3
        assert data["bom"]["total_area"] == output.bom.total_area
