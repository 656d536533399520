"""Tests for domain entities and value objects."""

from __future__ import annotations

import pytest

from kitchen_planner.domain import (
    DEFAULT_ZONES,
    BOMItem,
    CabinetPreset,
    CabinetType,
    CabinetUnit,
    Obstacle,
    ObstacleType,
    Placement,
    Project,
    ProjectSettings,
    Zone,
    ZoneId,
    default_zone,
)


class TestCabinetPreset:
    """Cabinet type derivation from preset names."""

    @pytest.mark.parametrize(
        "preset,expected",
        [
            (CabinetPreset.BASE_DOOR, CabinetType.BASE),
            (CabinetPreset.BASE_DRAWER_3, CabinetType.BASE),
            (CabinetPreset.WALL_STD, CabinetType.WALL),
            (CabinetPreset.TALL_OVEN, CabinetType.TALL),
            (CabinetPreset.FILLER, CabinetType.BASE),
        ],
    )
    def test_cabinet_type(self, preset: CabinetPreset, expected: CabinetType) -> None:
        assert preset.cabinet_type == expected

    def test_display_names(self) -> None:
        assert [p.value for p in CabinetPreset] == [
            "Base 2-Door",
            "Base 3-Drawer",
            "Wall Standard",
            "Tall Oven/Micro",
            "Filler",
        ]


class TestProjectSettings:
    def test_defaults(self) -> None:
        settings = ProjectSettings()
        assert settings.height_for(CabinetType.BASE) == 720
        assert settings.height_for(CabinetType.TALL) == 2100
        assert settings.depth_for(CabinetType.WALL) == 320
        assert settings.depth_for(CabinetType.TALL) == 580
        assert settings.thickness == 16

    def test_non_positive_thickness_rejected(self) -> None:
        with pytest.raises(ValueError):
            ProjectSettings(thickness=0)


class TestObstacle:
    def test_defaults(self) -> None:
        obstacle = Obstacle(ObstacleType.WINDOW, from_left=500, width=1200)
        assert (obstacle.height, obstacle.depth, obstacle.elevation) == (2100, 150, 0)
        assert obstacle.end == 1700

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValueError):
            Obstacle(ObstacleType.DOOR, from_left=0, width=-1)

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValueError):
            Obstacle(ObstacleType.DOOR, from_left=-10, width=100)


class TestCabinetUnit:
    def test_for_preset_derives_type(self) -> None:
        unit = CabinetUnit.for_preset(CabinetPreset.TALL_OVEN, 600)
        assert unit.cabinet_type == CabinetType.TALL
        assert unit.qty == 1
        assert not unit.is_auto_filled

    def test_ids_are_unique(self) -> None:
        a = CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600)
        b = CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600)
        assert a.id != b.id

    def test_zero_width_allowed(self) -> None:
        assert CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 0).width == 0

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(ValueError):
            CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, -600)


class TestZone:
    """Zone editing operations."""

    def test_add_cabinet_assigns_fresh_id(self) -> None:
        zone = Zone(id=ZoneId.WALL_A, total_length=3000)
        unit = CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600)

        added = zone.add_cabinet(unit)

        assert added.id != unit.id
        assert zone.cabinets == [added]

    def test_update_and_remove_cabinet(self) -> None:
        zone = Zone(id=ZoneId.WALL_A, total_length=3000)
        zone.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600))
        zone.add_cabinet(CabinetUnit.for_preset(CabinetPreset.WALL_STD, 600))

        replacement = CabinetUnit.for_preset(CabinetPreset.TALL_OVEN, 600)
        zone.update_cabinet(0, replacement)
        removed = zone.remove_cabinet(1)

        assert zone.cabinets == [replacement]
        assert removed.preset == CabinetPreset.WALL_STD

    def test_obstacle_editing(self) -> None:
        zone = Zone(id=ZoneId.WALL_A, total_length=3000)
        added = zone.add_obstacle(Obstacle(ObstacleType.PIPE, from_left=100, width=50))
        zone.update_obstacle(0, Obstacle(ObstacleType.PIPE, from_left=200, width=50))

        assert zone.obstacles[0].from_left == 200
        assert zone.remove_obstacle(0).id != added.id
        assert zone.obstacles == []

    def test_manual_and_auto_split(self) -> None:
        manual = CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600)
        auto = CabinetUnit.for_preset(CabinetPreset.FILLER, 50, is_auto_filled=True)
        zone = Zone(id=ZoneId.WALL_A, total_length=3000, cabinets=[auto, manual])

        assert zone.manual_cabinets == [manual]
        assert zone.auto_cabinets == [auto]

    def test_clear(self, door_zone: Zone) -> None:
        door_zone.add_cabinet(CabinetUnit.for_preset(CabinetPreset.BASE_DOOR, 600))
        door_zone.clear()
        assert door_zone.obstacles == [] and door_zone.cabinets == []

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValueError):
            Zone(id=ZoneId.WALL_A, total_length=-1)


class TestProject:
    def test_new_project_has_default_zones(self) -> None:
        project = Project.new("Kitchen")

        assert project.name == "Kitchen"
        assert [z.id for z in project.zones] == [z for z, _, _ in DEFAULT_ZONES]
        assert [z.id for z in project.active_zones] == [ZoneId.WALL_A]
        assert project.zone(ZoneId.ISLAND).total_length == 2400
        assert all(not z.cabinets and not z.obstacles for z in project.zones)

    def test_zone_lookup_missing(self) -> None:
        project = Project(zones=[default_zone(ZoneId.WALL_A)])
        with pytest.raises(KeyError):
            project.zone(ZoneId.ISLAND)

    def test_set_zone_active(self) -> None:
        project = Project.new()
        project.set_zone_active(ZoneId.WALL_A, False)
        project.set_zone_active(ZoneId.WALL_C, True)
        assert [z.id for z in project.active_zones] == [ZoneId.WALL_C]

    def test_replace_zone(self) -> None:
        project = Project.new()
        replacement = Zone(id=ZoneId.WALL_B, total_length=1800, active=True)

        project.replace_zone(replacement)

        assert project.zone(ZoneId.WALL_B) is replacement
        assert [z.id for z in project.zones] == [ZoneId.WALL_A, ZoneId.WALL_B, ZoneId.WALL_C, ZoneId.ISLAND]


class TestValueObjects:
    def test_placement_end(self) -> None:
        assert Placement(start=900, width=450).end == 1350

    def test_bom_item_area(self) -> None:
        item = BOMItem(id="x", name="Side Panel", qty=2, width=560, length=720, material="16mm White")
        assert item.area_m2 == pytest.approx(0.8064)
