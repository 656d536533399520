"""Validators for project configurations.

- ObstacleValidator: obstacle bounds, overlaps, window-only fields
- CabinetValidator: wall overflow, inactive zones, preset/type agreement

The ValidatorRegistry coordinates running them against a configuration.
"""

from .base import ValidationError, ValidationResult, ValidationWarning
from .cabinet import CabinetValidator
from .obstacle import ObstacleValidator
from .registry import Validator, ValidatorRegistry

__all__ = [
    "CabinetValidator",
    "ObstacleValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "Validator",
    "ValidatorRegistry",
]
