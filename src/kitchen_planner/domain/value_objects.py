"""Value objects for the kitchen planning domain.

All dimensions are in millimeters; areas are in square meters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import CabinetUnit


class ObstacleType(str, Enum):
    """Fixed architectural features that cabinets must avoid."""

    DOOR = "door"
    WINDOW = "window"
    COLUMN = "column"
    PIPE = "pipe"


class CabinetType(str, Enum):
    """Vertical band a cabinet occupies.

    Attributes:
        BASE: Floor-standing cabinet under the worktop.
        WALL: Hung cabinet above the worktop.
        TALL: Full-height cabinet.
    """

    BASE = "BASE"
    WALL = "WALL"
    TALL = "TALL"


class CabinetPreset(str, Enum):
    """Construction templates for cabinets.

    The enum value is the display name printed on BOM labels.
    """

    BASE_DOOR = "Base 2-Door"
    BASE_DRAWER_3 = "Base 3-Drawer"
    WALL_STD = "Wall Standard"
    TALL_OVEN = "Tall Oven/Micro"
    FILLER = "Filler"

    @property
    def cabinet_type(self) -> CabinetType:
        """Cabinet type implied by this preset's name."""
        if "Wall" in self.value:
            return CabinetType.WALL
        if "Tall" in self.value or "Utility" in self.value:
            return CabinetType.TALL
        return CabinetType.BASE


class ZoneId(str, Enum):
    """Identifiers of the fixed zones of a project."""

    WALL_A = "WALL_A"
    WALL_B = "WALL_B"
    WALL_C = "WALL_C"
    ISLAND = "ISLAND"


def format_mm(value: float) -> str:
    """Format a millimeter value without a trailing ``.0``."""
    return f"{value:g}"


@dataclass(frozen=True)
class ProjectSettings:
    """Global cabinet dimensions shared by every zone.

    Attributes:
        base_height: Height of BASE cabinets.
        wall_height: Height of WALL cabinets.
        tall_height: Height of TALL cabinets.
        depth_base: Depth of BASE cabinets.
        depth_wall: Depth of WALL cabinets.
        depth_tall: Depth of TALL cabinets.
        thickness: Carcass panel material thickness.
    """

    base_height: float = 720
    wall_height: float = 720
    tall_height: float = 2100
    depth_base: float = 560
    depth_wall: float = 320
    depth_tall: float = 580
    thickness: float = 16

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Panel thickness must be positive")

    def height_for(self, cabinet_type: CabinetType) -> float:
        """Cabinet height for the given type."""
        if cabinet_type == CabinetType.WALL:
            return self.wall_height
        if cabinet_type == CabinetType.TALL:
            return self.tall_height
        return self.base_height

    def depth_for(self, cabinet_type: CabinetType) -> float:
        """Cabinet depth for the given type."""
        if cabinet_type == CabinetType.WALL:
            return self.depth_wall
        if cabinet_type == CabinetType.TALL:
            return self.depth_tall
        return self.depth_base


@dataclass(frozen=True)
class Placement:
    """Absolute horizontal position of a cabinet along a zone's wall axis."""

    start: float
    width: float

    @property
    def end(self) -> float:
        return self.start + self.width


@dataclass(frozen=True)
class TimelineInterval:
    """An occupied interval on a zone's wall axis.

    Attributes:
        start: Left edge of the interval.
        end: Right edge of the interval (exclusive).
        kind: Either "obstacle" or "cabinet".
        index: Index into the manual cabinet list, -1 for obstacles.
    """

    start: float
    end: float
    kind: str
    index: int = -1

    @property
    def is_cabinet(self) -> bool:
        return self.kind == "cabinet"


@dataclass(frozen=True)
class PlacedCabinet:
    """A stored cabinet together with its computed placement."""

    index: int
    unit: CabinetUnit
    placement: Placement


@dataclass(frozen=True)
class BOMItem:
    """A single line of a cabinet's bill of materials.

    Wood panels carry their cut dimensions; hardware lines carry
    ``width == length == 0`` and ``is_hardware=True``.

    Attributes:
        id: Unique identity of the line.
        name: Part or hardware name (e.g. "Side Panel", "Soft-Close Hinge").
        qty: Number of identical pieces.
        width: Panel width in mm.
        length: Panel length in mm.
        material: Material label (e.g. "16mm White", "6mm MDF", "Hardware").
        label: Reference to the parent cabinet, ``#<n> <preset>``.
        is_hardware: True for hardware lines.
    """

    id: str
    name: str
    qty: int
    width: float
    length: float
    material: str
    label: str = ""
    is_hardware: bool = False

    @property
    def area_m2(self) -> float:
        """Total panel area of this line in square meters."""
        return self.width * self.length * self.qty / 1_000_000


@dataclass(frozen=True)
class BOMGroup:
    """Wood panels of one cabinet instance."""

    cabinet_id: str
    cabinet_name: str
    items: tuple[BOMItem, ...] = ()

    @property
    def area_m2(self) -> float:
        return sum(item.area_m2 for item in self.items)


@dataclass(frozen=True)
class BOMReport:
    """Aggregated bill of materials for a project.

    Attributes:
        groups: One group per cabinet, zone order then cabinet order.
        hardware_summary: Hardware name to total quantity.
        total_area: Total wood panel area in m², rounded to 2 decimals.
    """

    groups: tuple[BOMGroup, ...] = ()
    hardware_summary: dict[str, int] = field(default_factory=dict)
    total_area: float = 0.0

    @property
    def panel_count(self) -> int:
        """Total number of wood pieces across all groups."""
        return sum(item.qty for group in self.groups for item in group.items)
