"""Configuration file loader with error reporting.

Loads JSON door panel configuration files and turns file system errors,
JSON syntax errors and Pydantic validation errors into a single
ConfigError carrying a category and per-field details. The CLI prints
those details, and the REST API returns them in its error bodies.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from doorpanels.application.config.schema import DoorPanelConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Line/column for JSON errors, or one entry per invalid
            field for validation errors
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
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Args:
        loc: Path segments, strings for keys and ints for list indices

    Returns:
        Dotted path such as "peephole.diameter". Model-level errors have
        an empty location and give an empty string.

    Examples:
        >>> _format_json_path(("door", "width"))
        'door.width'
        >>> _format_json_path(("items", 0, "height"))
        'items[0].height'
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
    """Flatten a Pydantic ValidationError into one dict per failure.

    Args:
        error: The Pydantic ValidationError to process

    Returns:
        Dicts with ``path``, ``message``, the offending ``value`` and the
        Pydantic ``error_type``
    """
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a multi-line message.

    Whole-object inputs are left out of the message; a failing door or
    peephole section would otherwise be echoed in full.
    """
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> DoorPanelConfiguration:
    """Validate parsed data against the root schema.

    Raises:
        ConfigError: With ``error_type="validation"`` and one detail per
            invalid field.
    """
    try:
        return DoorPanelConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        logger.debug(f"Configuration rejected with {len(details)} error(s)")
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> DoorPanelConfiguration:
    """Load and validate a door panel configuration from a JSON file.

    This function reports three kinds of failure:
    1. The file is missing or unreadable
    2. The file is not valid JSON
    3. The JSON does not match the configuration schema

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated DoorPanelConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
            The error_type attribute tells which:
            - "file_not_found": File does not exist
            - "permission_denied" / "file_read_error": File cannot be read
            - "json_parse": Invalid JSON syntax, with line and column
            - "validation": Schema validation failed

    Example:
        >>> try:
        ...     config = load_config(Path("front-door.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
        ...     for detail in e.details:
        ...         print(f"  {detail.get('path')}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    logger.debug(f"Loaded config file {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> DoorPanelConfiguration:
    """Load and validate a door panel configuration from a dictionary.

    Used for REST request bodies and for configurations assembled from
    command-line options by the merger.

    Args:
        data: Dictionary containing configuration data

    Returns:
        A validated DoorPanelConfiguration instance

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
