"""Text formatters for zone layouts and bills of materials."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from kitchen_planner.domain.value_objects import BOMReport, format_mm

if TYPE_CHECKING:
    from kitchen_planner.application.dtos import ProjectReportOutput
    from kitchen_planner.domain.services.zone_layout import ZoneLayout


class CutListFormatter:
    """Formats the BOM panel groups as a cut list table."""

    def format(self, report: BOMReport) -> str:
        """Format every group's panels, followed by the total area."""
        if not report.groups:
            return "No cabinets in active zones."

        lines = [
            "CUT LIST",
            "=" * 78,
            f"{'Part':<22} {'Width':>8} {'Length':>8} {'Qty':>4}  {'Material':<14} {'Area m2':>8}",
        ]

        for group in report.groups:
            lines.append("-" * 78)
            lines.append(group.cabinet_name)
            for item in group.items:
                lines.append(
                    f"  {item.name:<20} {format_mm(item.width):>8} "
                    f"{format_mm(item.length):>8} {item.qty:>4}  "
                    f"{item.material:<14} {item.area_m2:>8.3f}"
                )
            lines.append(f"  {'Subtotal':<20} {'':>8} {'':>8} {'':>4}  {'':<14} {group.area_m2:>8.3f}")

        lines.append("=" * 78)
        lines.append(f"{'TOTAL':<22} {'':>8} {'':>8} {report.panel_count:>4}  {'':<14} {report.total_area:>8.2f}")
        return "\n".join(lines)


class HardwareSummaryFormatter:
    """Formats the hardware summary of a BOM report."""

    def format(self, report: BOMReport, title: str = "HARDWARE") -> str:
        lines = [
            title,
            "=" * 40,
        ]

        if not report.hardware_summary:
            lines.append("No hardware required.")
            return "\n".join(lines)

        for name, qty in sorted(report.hardware_summary.items()):
            lines.append(f"  {name:<30} {qty:>6}")

        lines.append("-" * 40)
        lines.append(f"{'TOTAL':<32} {sum(report.hardware_summary.values()):>6}")
        return "\n".join(lines)


class PlacementTableFormatter:
    """Formats a zone layout as a table of cabinet positions."""

    def format(self, layout: ZoneLayout) -> str:
        zone = layout.zone
        lines = [
            f"{zone.id.value} ({format_mm(zone.total_length)}mm)",
            "-" * 64,
            f"{'#':>3}  {'Preset':<16} {'Type':<5} {'Start':>7} {'End':>7} {'Width':>7}  Notes",
        ]

        overflow = {pc.index for pc in layout.overflow}
        for pc in layout.placed_cabinets:
            notes = []
            if pc.unit.is_auto_filled:
                notes.append("auto")
            if pc.index in overflow:
                notes.append("past wall end")
            lines.append(
                f"{pc.index + 1:>3}  {pc.unit.preset.value:<16} "
                f"{pc.unit.cabinet_type.value:<5} {format_mm(pc.placement.start):>7} "
                f"{format_mm(pc.placement.end):>7} {format_mm(pc.placement.width):>7}  "
                f"{', '.join(notes)}"
            )

        if not layout.placed_cabinets:
            lines.append("  (no cabinets)")

        if layout.obstacles:
            lines.append("")
            lines.append("Obstacles:")
            for obstacle in layout.obstacles:
                lines.append(
                    f"  {obstacle.obstacle_type.value:<8} "
                    f"{format_mm(obstacle.from_left):>7} - {format_mm(obstacle.end):<7} "
                    f"({format_mm(obstacle.width)}mm)"
                )

        return "\n".join(lines)


class ZoneElevationFormatter:
    """Formats a zone layout as a proportional ASCII strip.

    The strip has one row for obstacles and one for cabinets. Manual
    cabinets are drawn with ``=``, auto-filled ones with ``~``, obstacles
    with ``#`` and free wall with ``.``. Anything past the wall end is
    drawn after the closing ``|``.
    """

    def __init__(self, width: int = 72) -> None:
        self.width = width

    def format(self, layout: ZoneLayout) -> str:
        zone = layout.zone
        extent = max(zone.total_length, layout.occupied_length)
        if extent <= 0:
            return f"{zone.id.value}: empty wall"

        scale = self.width / extent
        wall_cols = round(zone.total_length * scale)

        obstacle_row = self._blank(wall_cols)
        for obstacle in layout.obstacles:
            self._paint(obstacle_row, obstacle.from_left, obstacle.end, scale, "#")

        cabinet_row = self._blank(wall_cols)
        for pc in layout.placed_cabinets:
            char = "~" if pc.unit.is_auto_filled else "="
            self._paint(cabinet_row, pc.placement.start, pc.placement.end, scale, char)
            start_col = int(pc.placement.start * scale)
            if pc.placement.width > 0 and start_col < len(cabinet_row):
                cabinet_row[start_col] = "["

        lines = [
            f"{zone.id.value} elevation (1 char = {format_mm(round(1 / scale))}mm)",
            "obstacles " + self._with_wall_end(obstacle_row, wall_cols),
            "cabinets  " + self._with_wall_end(cabinet_row, wall_cols),
            f"{'':10}0{format_mm(zone.total_length) + 'mm':>{max(wall_cols, 1)}}",
        ]
        return "\n".join(lines)

    def _blank(self, wall_cols: int) -> list[str]:
        return ["."] * wall_cols + [" "] * (self.width - wall_cols)

    @staticmethod
    def _paint(row: list[str], start: float, end: float, scale: float, char: str) -> None:
        first = int(start * scale)
        last = max(first + 1, round(end * scale)) if end > start else first
        for col in range(first, min(last, len(row))):
            row[col] = char

    @staticmethod
    def _with_wall_end(row: list[str], wall_cols: int) -> str:
        return "|" + "".join(row[:wall_cols]) + "|" + "".join(row[wall_cols:]).rstrip()


class ReportJsonFormatter:
    """Serializes a project report (layouts and BOM) as JSON."""

    def format(self, output: ProjectReportOutput, indent: int = 2) -> str:
        return json.dumps(self.to_dict(output), indent=indent)

    def to_dict(self, output: ProjectReportOutput) -> dict[str, Any]:
        return {
            "project": {"id": output.project.id, "name": output.project.name},
            "zones": [self._layout_dict(layout) for layout in output.layouts],
            "bom": bom_to_dict(output.bom),
        }

    @staticmethod
    def _layout_dict(layout: ZoneLayout) -> dict[str, Any]:
        return {
            "id": layout.zone.id.value,
            "total_length": layout.zone.total_length,
            "occupied_length": layout.occupied_length,
            "fits": layout.fits,
            "obstacles": [
                {
                    "id": o.id,
                    "type": o.obstacle_type.value,
                    "from_left": o.from_left,
                    "width": o.width,
                    "height": o.height,
                    "depth": o.depth,
                    "elevation": o.elevation,
                }
                for o in layout.obstacles
            ],
            "placements": [
                {
                    "index": pc.index,
                    "cabinet_id": pc.unit.id,
                    "preset": pc.unit.preset.value,
                    "type": pc.unit.cabinet_type.value,
                    "is_auto_filled": pc.unit.is_auto_filled,
                    "start": pc.placement.start,
                    "width": pc.placement.width,
                }
                for pc in layout.placed_cabinets
            ],
        }


def bom_to_dict(report: BOMReport) -> dict[str, Any]:
    """Plain-data form of a BOM report."""
    return {
        "groups": [
            {
                "cabinet_id": group.cabinet_id,
                "cabinet_name": group.cabinet_name,
                "items": [
                    {
                        "id": item.id,
                        "name": item.name,
                        "qty": item.qty,
                        "width": item.width,
                        "length": item.length,
                        "material": item.material,
                        "label": item.label,
                    }
                    for item in group.items
                ],
            }
            for group in report.groups
        ],
        "hardware_summary": dict(report.hardware_summary),
        "total_area": report.total_area,
    }
