"""Configuration schema, loading and validation for kitchen projects.

Public API:
    - ProjectConfiguration: Root configuration model
    - SettingsConfig, ZoneConfig, ObstacleConfig, CabinetConfig: Nested models
    - load_config / load_config_from_dict: Load and validate a project
    - save_config / dump_config: Write a project back out as JSON
    - ConfigError: Exception for configuration errors
    - config_to_project / project_to_config: Convert to and from the domain
    - validate_config: Advisory validation (ValidationResult)

Example:
    >>> from pathlib import Path
    >>> from kitchen_planner.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"{config.name}: {len(config.zones)} zones")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from kitchen_planner.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetConfig,
    ObstacleConfig,
    ProjectConfiguration,
    SettingsConfig,
    ZoneConfig,
)
from kitchen_planner.application.config.loader import (
    ConfigError,
    dump_config,
    load_config,
    load_config_from_dict,
    save_config,
)
from kitchen_planner.application.config.adapter import (
    config_to_cabinet,
    config_to_obstacle,
    config_to_project,
    config_to_settings,
    config_to_zone,
    project_to_config,
)
from kitchen_planner.application.config.validator import validate_config
from kitchen_planner.application.config.validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    "CabinetConfig",
    "ConfigError",
    "ObstacleConfig",
    "ProjectConfiguration",
    "SUPPORTED_VERSIONS",
    "SettingsConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ZoneConfig",
    "config_to_cabinet",
    "config_to_obstacle",
    "config_to_project",
    "config_to_settings",
    "config_to_zone",
    "dump_config",
    "load_config",
    "load_config_from_dict",
    "project_to_config",
    "save_config",
    "validate_config",
]
