"""Elevation layout of a zone.

Places every stored cabinet of a zone (manual and auto-filled, in stored
order) for display by the elevation view and the text formatters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..value_objects import PlacedCabinet
from .placement import PlacementEngine

if TYPE_CHECKING:
    from ..entities import Obstacle, Zone

__all__ = [
    "ZoneLayout",
    "ZoneLayoutService",
]


@dataclass(frozen=True)
class ZoneLayout:
    """Computed layout of one zone.

    Attributes:
        zone: The zone the layout was computed from.
        obstacles: Obstacles sorted by distance from the wall start.
        placed_cabinets: Cabinets with their placements, in stored order.
    """

    zone: Zone
    obstacles: tuple[Obstacle, ...] = ()
    placed_cabinets: tuple[PlacedCabinet, ...] = field(default_factory=tuple)

    @property
    def occupied_length(self) -> float:
        """Right edge of the rightmost cabinet, 0 for an empty zone."""
        return max((pc.placement.end for pc in self.placed_cabinets), default=0.0)

    @property
    def overflow(self) -> tuple[PlacedCabinet, ...]:
        """Cabinets running past the end of the wall."""
        return tuple(
            pc
            for pc in self.placed_cabinets
            if pc.placement.end > self.zone.total_length
        )

    @property
    def fits(self) -> bool:
        return not self.overflow


class ZoneLayoutService:
    """Computes zone layouts with a placement engine."""

    def __init__(self, placement_engine: PlacementEngine | None = None) -> None:
        self.placement_engine = placement_engine or PlacementEngine()

    def layout(self, zone: Zone) -> ZoneLayout:
        return ZoneLayout(
            zone=zone,
            obstacles=tuple(sorted(zone.obstacles, key=lambda o: o.from_left)),
            placed_cabinets=tuple(self.placement_engine.place_cabinets(zone)),
        )
