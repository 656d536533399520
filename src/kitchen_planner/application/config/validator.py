"""Full validation of project configurations.

Pydantic already enforces the structural rules (types, non-negative widths,
unique zones). ``validate_config`` adds the advisory checks of the
registered validators.
"""

from kitchen_planner.application.config.schema import ProjectConfiguration
from kitchen_planner.application.config.validators import (
    CabinetValidator,
    ObstacleValidator,
    ValidationResult,
    ValidatorRegistry,
)


def register_default_validators() -> None:
    """Register the built-in validators if they are not registered yet."""
    for validator in (ObstacleValidator(), CabinetValidator()):
        if not ValidatorRegistry.is_registered(validator.name):
            ValidatorRegistry.register(validator)


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Run all enabled validators against ``config``.

    Args:
        config: A ProjectConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    register_default_validators()
    return ValidatorRegistry.validate_all(config)
