"""Obstacle validation for project configurations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kitchen_planner.domain.value_objects import ObstacleType

from .base import ValidationResult

if TYPE_CHECKING:
    from kitchen_planner.application.config.schema import ProjectConfiguration


class ObstacleValidator:
    """Validator for obstacle-related configuration rules.

    - Obstacle must start on the wall (error)
    - Obstacle should end on the wall (warning)
    - Obstacles should not overlap each other (warning)
    - Elevation is only meaningful for windows (warning)
    """

    @property
    def name(self) -> str:
        return "obstacle"

    def validate(self, config: ProjectConfiguration) -> ValidationResult:
        result = ValidationResult()

        for z, zone in enumerate(config.zones):
            for i, obstacle in enumerate(zone.obstacles):
                path = f"zones[{z}].obstacles[{i}]"
                end = obstacle.from_left + obstacle.width

                if obstacle.from_left >= zone.total_length and zone.total_length > 0:
                    result.add_error(
                        path=path,
                        message=(
                            f"Obstacle starts beyond the end of {zone.id.value} "
                            f"(wall length: {zone.total_length:g}, "
                            f"obstacle starts at: {obstacle.from_left:g})"
                        ),
                        value=obstacle.from_left,
                    )
                elif end > zone.total_length:
                    result.add_warning(
                        path=path,
                        message=(
                            f"Obstacle extends beyond the end of {zone.id.value} "
                            f"(wall length: {zone.total_length:g}, "
                            f"obstacle ends at: {end:g})"
                        ),
                    )

                if obstacle.elevation and obstacle.type != ObstacleType.WINDOW:
                    result.add_warning(
                        path=f"{path}.elevation",
                        message=f"Elevation is ignored for {obstacle.type.value} obstacles",
                        suggestion="Remove the elevation or change the type to window",
                    )

            spans = sorted(
                (o.from_left, o.from_left + o.width, i)
                for i, o in enumerate(zone.obstacles)
            )
            if not spans:
                continue
            # reach: furthest obstacle end seen so far
            _, reach, reach_idx = spans[0]
            for start, end, idx in spans[1:]:
                if start < reach:
                    result.add_warning(
                        path=f"zones[{z}].obstacles[{idx}]",
                        message=f"Obstacle overlaps obstacle {reach_idx} on {zone.id.value}",
                        suggestion="Merge overlapping obstacles into one",
                    )
                if end > reach:
                    reach, reach_idx = end, idx

        return result
