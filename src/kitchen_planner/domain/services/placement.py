"""Placement of cabinets along a zone's wall axis.

Cabinets are flowed left to right from the wall start. Whenever the cursor
lands inside an obstacle, or a cabinet placed at the cursor would run into an
obstacle ahead of it, the cursor jumps to that obstacle's right edge and the
obstacle scan starts over. Each jump strictly increases the cursor to one of
finitely many obstacle ends, so the scan always reaches a fixed point.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..value_objects import PlacedCabinet, Placement

if TYPE_CHECKING:
    from ..entities import Obstacle, Zone

__all__ = [
    "PlacementEngine",
    "place",
]


class PlacementEngine:
    """Computes absolute cabinet positions around obstacles.

    The engine holds no state between calls.
    """

    def place(
        self,
        obstacles: Iterable[Obstacle],
        cabinet_widths: Sequence[float],
        wall_length: float | None = None,
    ) -> list[Placement]:
        """Place cabinets in order, skipping over obstacles.

        Args:
            obstacles: Obstacles on the wall, in any order.
            cabinet_widths: Cabinet widths in sequence order.
            wall_length: Length of the wall. Not enforced: cabinets may
                extend past it.

        Returns:
            One Placement per input width, in the same order.
        """
        spans = sorted(((o.from_left, o.end) for o in obstacles), key=lambda s: s[0])

        placements: list[Placement] = []
        cursor = 0.0
        for width in cabinet_widths:
            cursor = self._clear_position(cursor, width, spans)
            placements.append(Placement(start=cursor, width=width))
            cursor += width
        return placements

    def place_cabinets(self, zone: Zone) -> list[PlacedCabinet]:
        """Place every stored cabinet of ``zone`` in sequence order."""
        placements = self.place(
            zone.obstacles, [c.width for c in zone.cabinets], zone.total_length
        )
        return [
            PlacedCabinet(index=i, unit=unit, placement=placement)
            for i, (unit, placement) in enumerate(zip(zone.cabinets, placements))
        ]

    @staticmethod
    def _clear_position(
        cursor: float, width: float, spans: list[tuple[float, float]]
    ) -> float:
        """Advance ``cursor`` until a cabinet of ``width`` clears every span."""
        while True:
            for start, end in spans:
                if start <= cursor < end:
                    cursor = end
                    break
                if cursor < start < cursor + width:
                    cursor = end
                    break
            else:
                return cursor


_engine = PlacementEngine()


def place(
    obstacles: Iterable[Obstacle],
    cabinet_widths: Sequence[float],
    wall_length: float | None = None,
) -> list[Placement]:
    """Module-level shortcut for :meth:`PlacementEngine.place`."""
    return _engine.place(obstacles, cabinet_widths, wall_length)
