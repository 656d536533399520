"""CLI command implementations for the kitchen-planner application.

- validate: Validate a project file
"""

from kitchen_planner.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
