"""Cabinet sequence validation for project configurations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kitchen_planner.application.config.adapter import config_to_zone
from kitchen_planner.domain.services import ZoneLayoutService

from .base import ValidationResult

if TYPE_CHECKING:
    from kitchen_planner.application.config.schema import ProjectConfiguration


class CabinetValidator:
    """Validator for cabinet sequences.

    - Cabinets should fit on the wall once flowed around obstacles (warning)
    - Cabinets in an inactive zone are left out of the BOM (warning)
    - A cabinet type that disagrees with its preset (warning)
    """

    def __init__(self, layout_service: ZoneLayoutService | None = None) -> None:
        self.layout_service = layout_service or ZoneLayoutService()

    @property
    def name(self) -> str:
        return "cabinet"

    def validate(self, config: ProjectConfiguration) -> ValidationResult:
        result = ValidationResult()

        for z, zone_config in enumerate(config.zones):
            if not zone_config.cabinets:
                continue

            if not zone_config.active:
                result.add_warning(
                    path=f"zones[{z}]",
                    message=(
                        f"{zone_config.id.value} has cabinets but is inactive; "
                        "they are left out of the BOM"
                    ),
                    suggestion="Set active to true to include this zone",
                )

            for i, cabinet in enumerate(zone_config.cabinets):
                if cabinet.type is not None and cabinet.type != cabinet.preset.cabinet_type:
                    result.add_warning(
                        path=f"zones[{z}].cabinets[{i}].type",
                        message=(
                            f"Type {cabinet.type.value} differs from the "
                            f"{cabinet.preset.cabinet_type.value} type of "
                            f"preset '{cabinet.preset.value}'"
                        ),
                    )

            layout = self.layout_service.layout(config_to_zone(zone_config))
            for placed in layout.overflow:
                result.add_warning(
                    path=f"zones[{z}].cabinets[{placed.index}]",
                    message=(
                        f"Cabinet ends at {placed.placement.end:g}, past the end of "
                        f"{zone_config.id.value} ({zone_config.total_length:g})"
                    ),
                    suggestion="Reduce cabinet widths or remove cabinets",
                )

        return result
