"""Tests for ZoneLayoutService."""

from __future__ import annotations

from kitchen_planner.domain import (
    CabinetPreset,
    CabinetUnit,
    Obstacle,
    ObstacleType,
    Zone,
    ZoneId,
    ZoneLayoutService,
    auto_fill_zone,
)


class TestZoneLayoutService:
    def test_empty_zone(self) -> None:
        layout = ZoneLayoutService().layout(Zone(id=ZoneId.WALL_A, total_length=3000))

        assert layout.placed_cabinets == ()
        assert layout.occupied_length == 0
        assert layout.fits

    def test_obstacles_sorted_by_position(self) -> None:
        zone = Zone(
            id=ZoneId.WALL_A,
            total_length=3000,
            obstacles=[
                Obstacle(ObstacleType.WINDOW, from_left=2000, width=600),
                Obstacle(ObstacleType.PIPE, from_left=100, width=50),
            ],
        )
        layout = ZoneLayoutService().layout(zone)
        assert [o.from_left for o in layout.obstacles] == [100, 2000]

    def test_cabinets_placed_around_obstacles(self, door_zone: Zone) -> None:
        door_zone.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600))
        door_zone.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600))

        layout = ZoneLayoutService().layout(door_zone)

        assert [pc.placement.start for pc in layout.placed_cabinets] == [0, 1900]
        assert layout.occupied_length == 2500
        assert layout.fits

    def test_overflow(self) -> None:
        zone = Zone(
            id=ZoneId.ISLAND,
            total_length=1000,
            cabinets=[
                CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600),
                CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600),
            ],
        )
        layout = ZoneLayoutService().layout(zone)

        assert not layout.fits
        assert [pc.index for pc in layout.overflow] == [1]
        assert layout.occupied_length == 1200

    def test_auto_filled_pairs_are_laid_out_in_sequence(self, door_zone: Zone) -> None:
        """BASE/WALL pairs share a width but are flowed one after the other."""
        layout = ZoneLayoutService().layout(auto_fill_zone(door_zone))

        assert len(layout.placed_cabinets) == 6
        assert layout.placed_cabinets[1].placement.start >= layout.placed_cabinets[0].placement.end
