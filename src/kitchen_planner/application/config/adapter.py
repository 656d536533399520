"""Conversion between configuration models and domain entities."""

from kitchen_planner.application.config.schema import (
    CabinetConfig,
    ObstacleConfig,
    ProjectConfiguration,
    SettingsConfig,
    ZoneConfig,
)
from kitchen_planner.domain.entities import (
    CabinetUnit,
    Obstacle,
    Project,
    Zone,
    default_zone,
    new_id,
)
from kitchen_planner.domain.value_objects import ProjectSettings, ZoneId


def config_to_settings(config: SettingsConfig) -> ProjectSettings:
    return ProjectSettings(**config.model_dump())


def config_to_obstacle(config: ObstacleConfig) -> Obstacle:
    """Convert an obstacle config, applying the documented defaults."""
    obstacle = Obstacle(
        obstacle_type=config.type,
        from_left=config.from_left,
        width=config.width,
        id=config.id or new_id(),
    )
    if config.height is not None:
        obstacle.height = config.height
    if config.depth is not None:
        obstacle.depth = config.depth
    if config.elevation is not None:
        obstacle.elevation = config.elevation
    return obstacle


def config_to_cabinet(config: CabinetConfig) -> CabinetUnit:
    """Convert a cabinet config; the type is derived from the preset if absent."""
    return CabinetUnit(
        preset=config.preset,
        cabinet_type=config.type or config.preset.cabinet_type,
        width=config.width,
        qty=config.qty,
        is_auto_filled=config.is_auto_filled,
        id=config.id or new_id(),
    )


def config_to_zone(config: ZoneConfig) -> Zone:
    return Zone(
        id=config.id,
        total_length=config.total_length,
        active=config.active,
        obstacles=[config_to_obstacle(o) for o in config.obstacles],
        cabinets=[config_to_cabinet(c) for c in config.cabinets],
    )


def config_to_project(config: ProjectConfiguration) -> Project:
    """Convert a project configuration to a domain Project.

    Zones are returned in the fixed zone order. Zones absent from the
    configuration get their default length and are inactive.
    """
    configured = {zone.id: config_to_zone(zone) for zone in config.zones}
    zones: list[Zone] = []
    for zone_id in ZoneId:
        zone = configured.get(zone_id)
        if zone is None:
            zone = default_zone(zone_id)
            zone.active = False
        zones.append(zone)
    return Project(
        name=config.name,
        settings=config_to_settings(config.settings),
        zones=zones,
    )


def project_to_config(project: Project) -> ProjectConfiguration:
    """Convert a domain Project back to its configuration model."""
    settings = project.settings
    return ProjectConfiguration(
        name=project.name,
        settings=SettingsConfig(
            base_height=settings.base_height,
            wall_height=settings.wall_height,
            tall_height=settings.tall_height,
            depth_base=settings.depth_base,
            depth_wall=settings.depth_wall,
            depth_tall=settings.depth_tall,
            thickness=settings.thickness,
        ),
        zones=[
            ZoneConfig(
                id=zone.id,
                active=zone.active,
                total_length=zone.total_length,
                obstacles=[
                    ObstacleConfig(
                        type=o.obstacle_type,
                        from_left=o.from_left,
                        width=o.width,
                        height=o.height,
                        depth=o.depth,
                        elevation=o.elevation,
                        id=o.id,
                    )
                    for o in zone.obstacles
                ],
                cabinets=[
                    CabinetConfig(
                        preset=c.preset,
                        type=c.cabinet_type,
                        width=c.width,
                        qty=c.qty,
                        is_auto_filled=c.is_auto_filled,
                        id=c.id,
                    )
                    for c in zone.cabinets
                ],
            )
            for zone in project.zones
        ],
    )
