"""Configuration file loader with error handling.

This module loads stored seating configurations from JSON files or
dictionaries. File system errors, JSON syntax errors and schema errors are
all reported as ConfigError with a category and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from seating.application.config.schema import ConfigurationInput


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
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


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("console", "placements", 0, "afterSeat"))
        'console.placements[0].afterSeat'
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


def extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Extract path, message, value and error_type from a Pydantic error."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def format_validation_error_message(details: list[dict[str, Any]], title: str) -> str:
    lines = [f"{title} validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def read_json_file(
    path: Path,
    error_class: type[ConfigError] = ConfigError,
    kind: str = "config",
) -> Any:
    """Read and parse a JSON file, raising ``error_class`` on failure."""
    if not path.exists():
        raise error_class(
            message=f"{kind.capitalize()} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise error_class(
            message=f"Permission denied reading {kind} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise error_class(
            message=f"Error reading {kind} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise error_class(
            message=f"Invalid JSON in {kind} file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def validate_model(
    model: type[BaseModel],
    data: Any,
    error_class: type[ConfigError] = ConfigError,
    title: str = "Configuration",
    path: Path | None = None,
) -> Any:
    """Validate ``data`` against ``model``, raising ``error_class`` on failure."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise error_class(
            message=format_validation_error_message(details, title),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> ConfigurationInput:
    """Load a stored seating configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does
            not have the structure of a configuration document. The
            ``error_type`` attribute is one of "file_not_found",
            "json_parse" or "validation".

    Example:
        >>> try:
        ...     config = load_config(Path("sofa.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    data = read_json_file(path)
    return validate_model(ConfigurationInput, data, path=path)


def load_config_from_dict(data: dict[str, Any]) -> ConfigurationInput:
    """Validate a configuration supplied as a dictionary (e.g. an API body).

    Raises:
        ConfigError: If the data fails validation.
    """
    return validate_model(ConfigurationInput, data)
