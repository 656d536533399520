"""Domain services for kitchen planning.

This package provides the pure layout and BOM engines:
- Placement of cabinets around obstacles
- Gap analysis and auto-fill of zones
- Expansion of cabinets into panels and hardware
- Project-wide BOM aggregation
"""

from .aggregator import ProjectAggregator, generate_project_bom
from .auto_fill import (
    MIN_STANDARD_WIDTH,
    STANDARD_WIDTHS,
    AutoFillService,
    auto_fill_zone,
)
from .bom_expansion import (
    HW_HANDLE,
    HW_HANGER,
    HW_HINGE,
    HW_LEG,
    HW_SLIDE,
    PRESET_RULES,
    BomExpander,
    CarcassDimensions,
    HardwareRule,
    PanelRule,
    PresetRule,
    expand_cabinet,
)
from .placement import PlacementEngine, place
from .zone_layout import ZoneLayout, ZoneLayoutService

__all__ = [
    "AutoFillService",
    "BomExpander",
    "CarcassDimensions",
    "HW_HANDLE",
    "HW_HANGER",
    "HW_HINGE",
    "HW_LEG",
    "HW_SLIDE",
    "HardwareRule",
    "MIN_STANDARD_WIDTH",
    "PRESET_RULES",
    "PanelRule",
    "PlacementEngine",
    "PresetRule",
    "ProjectAggregator",
    "STANDARD_WIDTHS",
    "ZoneLayout",
    "ZoneLayoutService",
    "auto_fill_zone",
    "expand_cabinet",
    "generate_project_bom",
    "place",
]
