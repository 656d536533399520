"""Validator registry for project configuration validators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from .base import ValidationResult

if TYPE_CHECKING:
    from kitchen_planner.application.config.schema import ProjectConfiguration

logger = logging.getLogger(__name__)


@runtime_checkable
class Validator(Protocol):
    """Protocol for configuration validators."""

    @property
    def name(self) -> str: ...

    def validate(self, config: ProjectConfiguration) -> ValidationResult: ...


class ValidatorRegistry:
    """Registry of validators run against project configurations.

    Example:
        ValidatorRegistry.register(ObstacleValidator())
        result = ValidatorRegistry.validate_all(config)
        ValidatorRegistry.disable("cabinet")
    """

    _validators: ClassVar[dict[str, Validator]] = {}
    _disabled: ClassVar[set[str]] = set()

    @classmethod
    def register(cls, validator: Validator) -> None:
        """Register a validator instance, replacing one with the same name."""
        name = validator.name
        if name in cls._validators:
            logger.warning(f"Overwriting existing validator '{name}'")
        cls._validators[name] = validator
        logger.debug(f"Registered validator '{name}': {type(validator).__name__}")

    @classmethod
    def get(cls, name: str) -> Validator:
        """Get a validator by name.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            available = ", ".join(sorted(cls._validators.keys()))
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {available or 'none'}"
            )
        return cls._validators[name]

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._validators.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def enable(cls, name: str) -> None:
        cls.get(name)
        cls._disabled.discard(name)
        logger.debug(f"Enabled validator '{name}'")

    @classmethod
    def disable(cls, name: str) -> None:
        """Skip ``name`` in :meth:`validate_all` until re-enabled."""
        cls.get(name)
        cls._disabled.add(name)
        logger.debug(f"Disabled validator '{name}'")

    @classmethod
    def is_enabled(cls, name: str) -> bool:
        return name in cls._validators and name not in cls._disabled

    @classmethod
    def validate_all(cls, config: ProjectConfiguration) -> ValidationResult:
        """Run every enabled validator and merge their results.

        A validator that raises is reported as a validation error rather than
        aborting the run.
        """
        result = ValidationResult()

        for name in sorted(cls._validators.keys()):
            if name in cls._disabled:
                logger.debug(f"Skipping disabled validator '{name}'")
                continue

            logger.debug(f"Running validator '{name}'")
            try:
                result.merge(cls._validators[name].validate(config))
            except Exception as e:
                logger.error(f"Validator '{name}' raised an exception: {e}")
                result.add_error(
                    path="validation",
                    message=f"Validator '{name}' failed: {e}",
                )

        return result

    @classmethod
    def clear(cls) -> None:
        """Remove all validators. Primarily useful for testing."""
        cls._validators.clear()
        cls._disabled.clear()
