"""Configuration schema models for kitchen projects.

Pydantic models describing the JSON project file. Enums are the domain
enums, which are ``(str, Enum)`` and serialize as their values.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from kitchen_planner.domain.value_objects import (
    CabinetPreset,
    CabinetType,
    ObstacleType,
    ZoneId,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with zones, obstacles, cabinets and settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SettingsConfig(BaseModel):
    """Global cabinet dimensions in millimeters.

    Attributes:
        base_height: Height of BASE cabinets
        wall_height: Height of WALL cabinets
        tall_height: Height of TALL cabinets
        depth_base: Depth of BASE cabinets
        depth_wall: Depth of WALL cabinets
        depth_tall: Depth of TALL cabinets
        thickness: Carcass panel thickness
    """

    model_config = ConfigDict(extra="forbid")

    base_height: float = Field(default=720, gt=0)
    wall_height: float = Field(default=720, gt=0)
    tall_height: float = Field(default=2100, gt=0)
    depth_base: float = Field(default=560, gt=0)
    depth_wall: float = Field(default=320, gt=0)
    depth_tall: float = Field(default=580, gt=0)
    thickness: float = Field(default=16, gt=0, le=100)


class ObstacleConfig(BaseModel):
    """Configuration for an obstacle on a zone's wall.

    Attributes:
        type: The kind of obstacle (door, window, column, pipe)
        from_left: Distance from wall start to the obstacle's left edge
        width: Obstacle width along the wall
        height: Obstacle height (default 2100)
        depth: Obstacle depth (default 150)
        elevation: Height above floor, for windows (default 0)
        id: Optional identity, generated when omitted
    """

    model_config = ConfigDict(extra="forbid")

    type: ObstacleType
    from_left: float = Field(ge=0, description="Distance from wall start")
    width: float = Field(ge=0, description="Obstacle width")
    height: float | None = Field(default=None, gt=0)
    depth: float | None = Field(default=None, gt=0)
    elevation: float | None = Field(default=None, ge=0)
    id: str | None = None


class CabinetConfig(BaseModel):
    """Configuration for a cabinet in a zone's sequence.

    Attributes:
        preset: Construction template, by enum name or display name
        type: Cabinet type; derived from the preset when omitted
        width: Width along the wall (zero allowed)
        qty: Always 1 in practice
        is_auto_filled: True for units generated by auto-fill
        id: Optional identity, generated when omitted
    """

    model_config = ConfigDict(extra="forbid")

    preset: CabinetPreset
    type: CabinetType | None = None
    width: float = Field(ge=0, description="Cabinet width")
    qty: int = Field(default=1, ge=1)
    is_auto_filled: bool = False
    id: str | None = None

    @field_validator("preset", mode="before")
    @classmethod
    def accept_preset_name(cls, v: object) -> object:
        """Accept ``BASE_DOOR`` as well as ``Base 2-Door``."""
        if isinstance(v, str) and v in CabinetPreset.__members__:
            return CabinetPreset[v]
        return v


class ZoneConfig(BaseModel):
    """Configuration for one zone.

    Attributes:
        id: Zone identifier
        active: Whether the zone is part of the BOM
        total_length: Length of the wall axis
        obstacles: Obstacles on the wall
        cabinets: Ordered cabinet sequence
    """

    model_config = ConfigDict(extra="forbid")

    id: ZoneId
    active: bool = True
    total_length: float = Field(ge=0, description="Wall length")
    obstacles: list[ObstacleConfig] = Field(default_factory=list)
    cabinets: list[CabinetConfig] = Field(default_factory=list)


class ProjectConfiguration(BaseModel):
    """Root configuration model for a kitchen project file.

    Attributes:
        schema_version: Configuration schema version
        name: Project name
        settings: Global cabinet dimensions
        zones: Zone configurations; zone ids must be unique
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    name: str = "New Project"
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    zones: list[ZoneConfig] = Field(default_factory=list, max_length=len(ZoneId))

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_zones(self) -> "ProjectConfiguration":
        seen: set[ZoneId] = set()
        for zone in self.zones:
            if zone.id in seen:
                raise ValueError(f"Duplicate zone id: {zone.id.value}")
            seen.add(zone.id)
        return self
