"""Application commands (use cases) for kitchen planning."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable

from kitchen_planner.domain import (
    AutoFillService,
    Project,
    ProjectAggregator,
    ZoneId,
    ZoneLayoutService,
)

from .dtos import ProjectReportOutput

logger = logging.getLogger(__name__)


class AutoFillCommand:
    """Command to auto-fill zones of a project."""

    def __init__(self, auto_fill_service: AutoFillService | None = None) -> None:
        self.auto_fill_service = auto_fill_service or AutoFillService()

    def execute(
        self, project: Project, zone_ids: Iterable[ZoneId] | None = None
    ) -> Project:
        """Auto-fill zones and return the updated project.

        The input project is left untouched.

        Args:
            project: The project to fill.
            zone_ids: Zones to fill. Defaults to every active zone.

        Returns:
            A copy of ``project`` with the selected zones' cabinets regenerated.

        Raises:
            KeyError: If a zone id is not part of the project.
        """
        result = copy.deepcopy(project)
        targets = (
            [result.zone(zone_id) for zone_id in zone_ids]
            if zone_ids is not None
            else result.active_zones
        )
        for zone in targets:
            result.replace_zone(self.auto_fill_service.auto_fill(zone))
            logger.info(f"Auto-filled {zone.id.value}")
        return result


class GenerateReportCommand:
    """Command to produce zone layouts and the BOM of a project."""

    def __init__(
        self,
        layout_service: ZoneLayoutService | None = None,
        aggregator: ProjectAggregator | None = None,
    ) -> None:
        self.layout_service = layout_service or ZoneLayoutService()
        self.aggregator = aggregator or ProjectAggregator()

    def execute(self, project: Project) -> ProjectReportOutput:
        """Compute the layouts of active zones and the aggregated BOM."""
        if not project.active_zones:
            return ProjectReportOutput(
                project=project, errors=["Project has no active zones"]
            )

        layouts = [self.layout_service.layout(zone) for zone in project.active_zones]
        for layout in layouts:
            if not layout.fits:
                logger.warning(
                    f"{layout.zone.id.value}: {len(layout.overflow)} cabinet(s) "
                    f"extend past the wall end ({layout.zone.total_length:g}mm)"
                )
        return ProjectReportOutput(
            project=project,
            layouts=layouts,
            bom=self.aggregator.aggregate(project),
        )
