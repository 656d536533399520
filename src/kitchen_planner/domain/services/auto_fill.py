"""Gap analysis and auto-fill for zones.

Auto-fill discards every previously synthesized cabinet, re-derives where the
manual cabinets land, and fills every uncovered stretch of wall with standard
BASE/WALL pairs and fillers. Manual cabinets are never reordered, resized or
mutated.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..entities import CabinetUnit, Zone
from ..value_objects import CabinetPreset, CabinetType, TimelineInterval
from .placement import PlacementEngine

logger = logging.getLogger(__name__)

__all__ = [
    "AutoFillService",
    "MIN_STANDARD_WIDTH",
    "STANDARD_WIDTHS",
    "auto_fill_zone",
]


# Standard cabinet widths tried for each gap, largest first
STANDARD_WIDTHS: tuple[int, ...] = (900, 600, 500, 450, 400, 300)

# Gaps narrower than this get a single filler
MIN_STANDARD_WIDTH = 300


class AutoFillService:
    """Synthesizes cabinets to occupy the free space of a zone.

    Attributes:
        placement_engine: Engine used to locate the manual cabinets.
        standard_widths: Candidate widths, tried in order.
        min_width: Smallest gap that receives standard cabinets.
    """

    def __init__(
        self,
        placement_engine: PlacementEngine | None = None,
        standard_widths: tuple[float, ...] = STANDARD_WIDTHS,
        min_width: float = MIN_STANDARD_WIDTH,
    ) -> None:
        if min_width <= 0 or any(w <= 0 for w in standard_widths):
            raise ValueError("Standard widths and minimum width must be positive")
        self.placement_engine = placement_engine or PlacementEngine()
        self.standard_widths = tuple(sorted(standard_widths, reverse=True))
        self.min_width = min_width

    def auto_fill(self, zone: Zone) -> Zone:
        """Return a copy of ``zone`` with its cabinet list regenerated.

        Obstacles and total length are carried over unchanged.
        """
        manual = zone.manual_cabinets
        timeline = self.build_timeline(zone, manual)

        cabinets: list[CabinetUnit] = []
        current_pos = 0.0
        for interval in timeline:
            if interval.start > current_pos:
                cabinets.extend(self.fill_gap(interval.start - current_pos))
            if interval.is_cabinet:
                cabinets.append(manual[interval.index])
            current_pos = max(current_pos, interval.end)

        if current_pos < zone.total_length:
            cabinets.extend(self.fill_gap(zone.total_length - current_pos))

        logger.debug(
            f"Auto-filled zone {zone.id.value}: {len(manual)} manual, "
            f"{len(cabinets) - len(manual)} generated"
        )
        return replace(zone, obstacles=list(zone.obstacles), cabinets=cabinets)

    def build_timeline(
        self, zone: Zone, manual: list[CabinetUnit]
    ) -> list[TimelineInterval]:
        """Occupied intervals of ``zone``, sorted by start.

        Obstacles come first among intervals sharing a start position.
        """
        timeline = [
            TimelineInterval(start=o.from_left, end=o.end, kind="obstacle")
            for o in sorted(zone.obstacles, key=lambda o: o.from_left)
        ]
        placements = self.placement_engine.place(
            zone.obstacles, [c.width for c in manual], zone.total_length
        )
        timeline.extend(
            TimelineInterval(start=p.start, end=p.end, kind="cabinet", index=i)
            for i, p in enumerate(placements)
        )
        timeline.sort(key=lambda interval: interval.start)
        return timeline

    def fill_gap(self, gap: float) -> list[CabinetUnit]:
        """Cabinets that exactly occupy a free stretch of ``gap`` mm.

        Gaps of at least ``min_width`` are packed greedily with BASE/WALL
        pairs of the largest fitting standard width; any positive residual
        below ``min_width`` becomes a filler.
        """
        units: list[CabinetUnit] = []
        remaining = gap
        while remaining >= self.min_width:
            width = next((w for w in self.standard_widths if w <= remaining), remaining)
            units.append(
                CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, width, is_auto_filled=True)
            )
            units.append(
                CabinetUnit.for_preset(CabinetPreset.WALL_STD, width, is_auto_filled=True)
            )
            remaining -= width
        if remaining > 0:
            units.append(
                CabinetUnit(
                    preset=CabinetPreset.FILLER,
                    cabinet_type=CabinetType.BASE,
                    width=remaining,
                    is_auto_filled=True,
                )
            )
        return units


def auto_fill_zone(zone: Zone) -> Zone:
    """Auto-fill ``zone`` with the default standard widths."""
    return AutoFillService().auto_fill(zone)
