"""Domain entities for kitchen planning."""

import uuid
from dataclasses import dataclass, field, replace

from .value_objects import CabinetPreset, CabinetType, ObstacleType, ProjectSettings, ZoneId


def new_id() -> str:
    """Generate a short unique identity for an entity."""
    return uuid.uuid4().hex[:9]


@dataclass
class Obstacle:
    """A fixed architectural feature on a zone's wall.

    Attributes:
        obstacle_type: The kind of obstacle (door, window, column, pipe).
        from_left: Distance from wall start to the obstacle's left edge.
        width: Obstacle width along the wall.
        height: Obstacle height.
        depth: Obstacle depth out from the wall.
        elevation: Distance above the floor (meaningful for windows only).
        id: Unique identity.
    """

    obstacle_type: ObstacleType
    from_left: float
    width: float
    height: float = 2100
    depth: float = 150
    elevation: float = 0
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("Obstacle width must be non-negative")
        if self.from_left < 0:
            raise ValueError("Obstacle position must be non-negative")

    @property
    def end(self) -> float:
        """Right edge of the obstacle along the wall axis."""
        return self.from_left + self.width


@dataclass
class CabinetUnit:
    """A cabinet in a zone's sequence.

    Only the order of cabinets in a zone is stored; absolute positions are
    always recomputed by the placement engine.

    Attributes:
        preset: Construction template.
        cabinet_type: Vertical band (derived from the preset on creation).
        width: Width along the wall axis. Zero is allowed.
        qty: Always 1 in practice, not used for fan-out.
        is_auto_filled: True for units synthesized by auto-fill.
        id: Unique identity.
    """

    preset: CabinetPreset
    cabinet_type: CabinetType
    width: float
    qty: int = 1
    is_auto_filled: bool = False
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("Cabinet width must be non-negative")

    @classmethod
    def for_preset(
        cls, preset: CabinetPreset, width: float, is_auto_filled: bool = False
    ) -> "CabinetUnit":
        """Create a unit whose type is derived from the preset."""
        return cls(
            preset=preset,
            cabinet_type=preset.cabinet_type,
            width=width,
            is_auto_filled=is_auto_filled,
        )


@dataclass
class Zone:
    """One linear wall segment (or island) with obstacles and cabinets.

    Attributes:
        id: Zone identifier.
        total_length: Length of the wall axis.
        active: Inactive zones are skipped by the BOM aggregator.
        obstacles: Obstacles on this wall.
        cabinets: Ordered cabinet sequence.
    """

    id: ZoneId
    total_length: float
    active: bool = False
    obstacles: list[Obstacle] = field(default_factory=list)
    cabinets: list[CabinetUnit] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.total_length < 0:
            raise ValueError("Zone length must be non-negative")

    @property
    def manual_cabinets(self) -> list[CabinetUnit]:
        return [c for c in self.cabinets if not c.is_auto_filled]

    @property
    def auto_cabinets(self) -> list[CabinetUnit]:
        return [c for c in self.cabinets if c.is_auto_filled]

    def add_cabinet(self, unit: CabinetUnit) -> CabinetUnit:
        """Append a copy of ``unit`` with a fresh identity."""
        added = replace(unit, id=new_id())
        self.cabinets.append(added)
        return added

    def update_cabinet(self, index: int, unit: CabinetUnit) -> None:
        """Replace the cabinet at ``index``."""
        self.cabinets[index] = unit

    def remove_cabinet(self, index: int) -> CabinetUnit:
        return self.cabinets.pop(index)

    def add_obstacle(self, obstacle: Obstacle) -> Obstacle:
        """Append a copy of ``obstacle`` with a fresh identity."""
        added = replace(obstacle, id=new_id())
        self.obstacles.append(added)
        return added

    def update_obstacle(self, index: int, obstacle: Obstacle) -> None:
        """Replace the obstacle at ``index``."""
        self.obstacles[index] = obstacle

    def remove_obstacle(self, index: int) -> Obstacle:
        return self.obstacles.pop(index)

    def clear(self) -> None:
        """Remove every obstacle and cabinet from the zone."""
        self.obstacles.clear()
        self.cabinets.clear()


# Default zone set of a new project: (id, total length, active)
DEFAULT_ZONES: tuple[tuple[ZoneId, float, bool], ...] = (
    (ZoneId.WALL_A, 3000, True),
    (ZoneId.WALL_B, 3000, False),
    (ZoneId.WALL_C, 3000, False),
    (ZoneId.ISLAND, 2400, False),
)


def default_zone(zone_id: ZoneId) -> Zone:
    """Create the empty default zone for ``zone_id``."""
    for default_id, length, active in DEFAULT_ZONES:
        if default_id == zone_id:
            return Zone(id=zone_id, total_length=length, active=active)
    raise KeyError(zone_id)


@dataclass
class Project:
    """A kitchen project: global settings and the fixed set of zones."""

    name: str = "New Project"
    settings: ProjectSettings = field(default_factory=ProjectSettings)
    zones: list[Zone] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    @classmethod
    def new(cls, name: str = "New Project") -> "Project":
        """Create a project with default settings and the default zones."""
        return cls(
            name=name,
            zones=[default_zone(zone_id) for zone_id, _, _ in DEFAULT_ZONES],
        )

    @property
    def active_zones(self) -> list[Zone]:
        return [z for z in self.zones if z.active]

    def zone(self, zone_id: ZoneId) -> Zone:
        """Look up a zone by id.

        Raises:
            KeyError: If the project has no such zone.
        """
        for zone in self.zones:
            if zone.id == zone_id:
                return zone
        raise KeyError(f"Project has no zone {ZoneId(zone_id).value}")

    def set_zone_active(self, zone_id: ZoneId, active: bool) -> None:
        self.zone(zone_id).active = active

    def replace_zone(self, zone: Zone) -> None:
        """Swap in ``zone`` for the stored zone with the same id."""
        for i, existing in enumerate(self.zones):
            if existing.id == zone.id:
                self.zones[i] = zone
                return
        raise KeyError(f"Project has no zone {zone.id.value}")
