"""Project-wide bill of materials aggregation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..value_objects import BOMGroup, BOMReport, format_mm
from .bom_expansion import BomExpander

if TYPE_CHECKING:
    from ..entities import Project

__all__ = [
    "ProjectAggregator",
    "generate_project_bom",
]


class ProjectAggregator:
    """Builds the BOM report of a project.

    Walks every active zone and every stored cabinet (manual or auto-filled
    alike), expands each cabinet, and accumulates panel area and hardware
    counts. The report is recomputed from scratch on every call.
    """

    def __init__(self, expander: BomExpander | None = None) -> None:
        self.expander = expander or BomExpander()

    def aggregate(self, project: Project) -> BOMReport:
        """Aggregate the BOM of all active zones of ``project``."""
        groups: list[BOMGroup] = []
        hardware_summary: dict[str, int] = {}
        total_area = 0.0

        for zone in project.active_zones:
            for index, unit in enumerate(zone.cabinets):
                parts = self.expander.expand(unit, project.settings, index)
                wood = tuple(p for p in parts if not p.is_hardware)

                for item in wood:
                    total_area += item.area_m2
                for item in parts:
                    if item.is_hardware:
                        hardware_summary[item.name] = (
                            hardware_summary.get(item.name, 0) + item.qty
                        )

                groups.append(
                    BOMGroup(
                        cabinet_id=unit.id,
                        cabinet_name=(
                            f"{zone.id.value} - #{index + 1} {unit.preset.value} "
                            f"({format_mm(unit.width)}mm)"
                        ),
                        items=wood,
                    )
                )

        return BOMReport(
            groups=tuple(groups),
            hardware_summary=hardware_summary,
            total_area=round(total_area, 2),
        )


def generate_project_bom(project: Project) -> BOMReport:
    """Aggregate ``project`` with the default preset rules."""
    return ProjectAggregator().aggregate(project)
