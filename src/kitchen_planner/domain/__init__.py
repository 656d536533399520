"""Domain layer - core business logic."""

from .entities import (
    DEFAULT_ZONES,
    CabinetUnit,
    Obstacle,
    Project,
    Zone,
    default_zone,
    new_id,
)
from .services import (
    AutoFillService,
    BomExpander,
    PlacementEngine,
    ProjectAggregator,
    ZoneLayout,
    ZoneLayoutService,
    auto_fill_zone,
    expand_cabinet,
    generate_project_bom,
    place,
)
from .value_objects import (
    BOMGroup,
    BOMItem,
    BOMReport,
    CabinetPreset,
    CabinetType,
    ObstacleType,
    PlacedCabinet,
    Placement,
    ProjectSettings,
    TimelineInterval,
    ZoneId,
)

__all__ = [
    "AutoFillService",
    "BOMGroup",
    "BOMItem",
    "BOMReport",
    "BomExpander",
    "CabinetPreset",
    "CabinetType",
    "CabinetUnit",
    "DEFAULT_ZONES",
    "Obstacle",
    "ObstacleType",
    "PlacedCabinet",
    "Placement",
    "PlacementEngine",
    "Project",
    "ProjectAggregator",
    "ProjectSettings",
    "TimelineInterval",
    "Zone",
    "ZoneId",
    "ZoneLayout",
    "ZoneLayoutService",
    "auto_fill_zone",
    "default_zone",
    "expand_cabinet",
    "generate_project_bom",
    "new_id",
    "place",
]
