"""Expansion of cabinet units into panels and hardware.

Every non-filler cabinet gets the common carcass (sides, bottom, top or top
rails, back). Preset-specific shelves, drawer parts and hardware come from
the ``PRESET_RULES`` table. Presets without an entry get the bare carcass.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..entities import CabinetUnit, new_id
from ..value_objects import (
    BOMItem,
    CabinetPreset,
    CabinetType,
    ProjectSettings,
    format_mm,
)

__all__ = [
    "BomExpander",
    "CarcassDimensions",
    "HardwareRule",
    "HW_HANDLE",
    "HW_HANGER",
    "HW_HINGE",
    "HW_LEG",
    "HW_SLIDE",
    "PRESET_RULES",
    "PanelRule",
    "PresetRule",
    "expand_cabinet",
]


HW_HINGE = "Soft-Close Hinge"
HW_SLIDE = "Drawer Slide (Pair)"
HW_LEG = "Adjustable Leg"
HW_HANDLE = "Handle/Knob"
HW_HANGER = "Wall Hanger (Pair)"

HARDWARE_MATERIAL = "Hardware"
BACK_MATERIAL = "6mm MDF"
DRAWER_MATERIAL = "16mm White"

# Depth of the top rails on BASE cabinets
TOP_RAIL_WIDTH = 100
# Clearance taken off the back panel in each direction
BACK_PANEL_INSET = 2
# Doors wider than this get a double set of hinges and handles
DOUBLE_DOOR_THRESHOLD = 400


@dataclass(frozen=True)
class CarcassDimensions:
    """Dimensions a construction rule is evaluated against.

    Attributes:
        width: Overall cabinet width.
        height: Cabinet height for its type.
        depth: Cabinet depth for its type.
        thickness: Carcass material thickness.
    """

    width: float
    height: float
    depth: float
    thickness: float

    @property
    def horiz_width(self) -> float:
        """Width of horizontal parts fitted between the two sides."""
        return self.width - 2 * self.thickness


Dimension = Callable[[CarcassDimensions], float]


@dataclass(frozen=True)
class PanelRule:
    """A wood panel a preset adds on top of the carcass.

    ``material`` of None means the carcass material.
    """

    name: str
    qty: int
    width: Dimension
    length: Dimension
    material: str | None = None


@dataclass(frozen=True)
class HardwareRule:
    """A hardware line whose quantity may depend on the cabinet width."""

    name: str
    qty: Callable[[float], int]


@dataclass(frozen=True)
class PresetRule:
    panels: tuple[PanelRule, ...] = ()
    hardware: tuple[HardwareRule, ...] = ()


def _fixed(qty: int) -> Callable[[float], int]:
    return lambda width: qty


def _per_door(single: int, double: int) -> Callable[[float], int]:
    return lambda width: double if width > DOUBLE_DOOR_THRESHOLD else single


PRESET_RULES: dict[CabinetPreset, PresetRule] = {
    CabinetPreset.BASE_DOOR: PresetRule(
        panels=(
            PanelRule("Shelf", 1, lambda d: d.depth - 20, lambda d: d.horiz_width),
        ),
        hardware=(
            HardwareRule(HW_HINGE, _per_door(2, 4)),
            HardwareRule(HW_HANDLE, _per_door(1, 2)),
            HardwareRule(HW_LEG, _fixed(4)),
        ),
    ),
    CabinetPreset.BASE_DRAWER_3: PresetRule(
        panels=(
            PanelRule(
                "Drawer Bottom",
                3,
                lambda d: d.depth - 50,
                lambda d: d.horiz_width - 26,
                DRAWER_MATERIAL,
            ),
            PanelRule(
                "Drawer Side", 6, lambda d: d.depth - 10, lambda d: 150, DRAWER_MATERIAL
            ),
        ),
        hardware=(
            HardwareRule(HW_SLIDE, _fixed(3)),
            HardwareRule(HW_HANDLE, _fixed(3)),
            HardwareRule(HW_LEG, _fixed(4)),
        ),
    ),
    CabinetPreset.WALL_STD: PresetRule(
        panels=(
            PanelRule("Shelf", 2, lambda d: d.depth - 20, lambda d: d.horiz_width),
        ),
        hardware=(
            HardwareRule(HW_HINGE, _per_door(2, 4)),
            HardwareRule(HW_HANDLE, _per_door(1, 2)),
            HardwareRule(HW_HANGER, _fixed(1)),
        ),
    ),
    CabinetPreset.TALL_OVEN: PresetRule(
        panels=(
            PanelRule(
                "Fixed Shelf (Oven)", 2, lambda d: d.depth, lambda d: d.horiz_width
            ),
        ),
        hardware=(
            HardwareRule(HW_LEG, _fixed(4)),
            HardwareRule(HW_SLIDE, _fixed(2)),
        ),
    ),
}


class BomExpander:
    """Expands a cabinet unit into its ordered BOM lines.

    Expansion never fails: presets missing from the rule table simply get
    the common carcass.

    Attributes:
        rules: Preset construction rule table.
    """

    def __init__(self, rules: dict[CabinetPreset, PresetRule] | None = None) -> None:
        self.rules = PRESET_RULES if rules is None else rules

    def expand(
        self, unit: CabinetUnit, settings: ProjectSettings, index: int
    ) -> list[BOMItem]:
        """Expand ``unit`` into panels and hardware.

        Args:
            unit: The cabinet to expand.
            settings: Global heights, depths and material thickness.
            index: Position of the cabinet in its zone, 0-based.

        Returns:
            BOM lines: carcass panels, preset panels, then hardware.
        """
        label = f"#{index + 1} {unit.preset.value}"
        dims = CarcassDimensions(
            width=unit.width,
            height=settings.height_for(unit.cabinet_type),
            depth=settings.depth_for(unit.cabinet_type),
            thickness=settings.thickness,
        )
        carcass_material = f"{format_mm(settings.thickness)}mm White"

        def panel(
            name: str,
            qty: int,
            width: float,
            length: float,
            material: str = carcass_material,
        ) -> BOMItem:
            return BOMItem(
                id=new_id(),
                name=name,
                qty=qty,
                width=width,
                length=length,
                material=material,
                label=label,
            )

        if unit.preset == CabinetPreset.FILLER:
            return [panel("Filler Panel", 1, unit.width, dims.height)]

        items = [
            panel("Side Panel", 2, dims.depth, dims.height),
            panel("Bottom Panel", 1, dims.depth, dims.horiz_width),
        ]
        if unit.cabinet_type == CabinetType.BASE:
            items.append(panel("Top Rail", 2, TOP_RAIL_WIDTH, dims.horiz_width))
        else:
            items.append(panel("Top Panel", 1, dims.depth, dims.horiz_width))
        items.append(
            panel(
                "Back Panel",
                1,
                unit.width - BACK_PANEL_INSET,
                dims.height - BACK_PANEL_INSET,
                BACK_MATERIAL,
            )
        )

        rule = self.rules.get(unit.preset)
        if rule is None:
            return items

        for panel_rule in rule.panels:
            items.append(
                panel(
                    panel_rule.name,
                    panel_rule.qty,
                    panel_rule.width(dims),
                    panel_rule.length(dims),
                    panel_rule.material or carcass_material,
                )
            )
        for hardware_rule in rule.hardware:
            items.append(
                BOMItem(
                    id=new_id(),
                    name=hardware_rule.name,
                    qty=hardware_rule.qty(unit.width),
                    width=0,
                    length=0,
                    material=HARDWARE_MATERIAL,
                    label=label,
                    is_hardware=True,
                )
            )
        return items


def expand_cabinet(
    unit: CabinetUnit, settings: ProjectSettings, index: int
) -> list[BOMItem]:
    """Expand ``unit`` with the default preset rules."""
    return BomExpander().expand(unit, settings, index)
