"""Project file loading and saving.

Project files are JSON documents validated against ``ProjectConfiguration``.
File system, JSON syntax and schema problems are all reported as
``ConfigError`` with an ``error_type`` and structured details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from kitchen_planner.application.config.schema import ProjectConfiguration


class ConfigError(Exception):
    """Exception raised for project configuration errors.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied, file_read_error,
            file_write_error, json_parse, validation
        path: Path to the configuration file (if applicable)
        details: Additional details (line/column for JSON, per-field
            validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("zones", 0, "cabinets", 2, "width"))
        'zones[0].cabinets[2].width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Project validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate a project configuration held in a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def load_config(path: Path) -> ProjectConfiguration:
    """Load and validate a project configuration from a JSON file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated ProjectConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Project file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading project file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading project file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in project file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Project file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
        )

    try:
        return load_config_from_dict(data)
    except ConfigError as e:
        e.path = path
        raise


def dump_config(config: ProjectConfiguration) -> str:
    """Serialize a project configuration as indented JSON."""
    return json.dumps(config.model_dump(mode="json"), indent=2)


def save_config(config: ProjectConfiguration, path: Path) -> None:
    """Write a project configuration to ``path``.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        path.write_text(dump_config(config) + "\n", encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            message=f"Error writing project file: {path}: {e}",
            error_type="file_write_error",
            path=path,
        )
