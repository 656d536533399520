"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from kitchen_planner.domain import BOMReport, Project, ZoneLayout


@dataclass
class ProjectReportOutput:
    """Output DTO for a project report.

    Attributes:
        project: The project the report was computed from.
        layouts: Zone layouts of the active zones, in zone order.
        bom: Aggregated bill of materials.
        errors: Problems that prevented a report from being produced.
    """

    project: Project
    layouts: list[ZoneLayout] = field(default_factory=list)
    bom: BOMReport = field(default_factory=BOMReport)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def overflowing_zones(self) -> list[ZoneLayout]:
        """Layouts whose cabinets run past the end of the wall."""
        return [layout for layout in self.layouts if not layout.fits]
