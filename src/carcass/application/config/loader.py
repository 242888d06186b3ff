"""Design document loader with comprehensive error handling.

This module loads and parses JSON design documents. It handles file system
errors, JSON parsing errors, and Pydantic validation errors with clear,
actionable error messages.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from carcass.application.config.schema import DesignDocument, TemplateConfigSchema


class ConfigError(Exception):
    """Exception raised for design document errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation)
        path: Path to the design file (if applicable)
        details: Additional error details (line/column for JSON, validation
            errors, etc.)
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
        >>> _format_json_path(("parts", 0, "w"))
        'parts[0].w'
        >>> _format_json_path(("room", "width"))
        'room.width'
    """
    segments: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if segments:
                segments[-1] = f"{segments[-1]}[{segment}]"
            else:
                segments.append(f"[{segment}]")
        else:
            segments.append(str(segment))
    return ".".join(segments)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value records."""
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
    lines = ["Design validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Design file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading design file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading design file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in design file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_design(path: Path) -> DesignDocument:
    """Load and validate a design document from a JSON file.

    Editor payloads that wrap the document in a ``modelData`` object are
    unwrapped first.

    Args:
        path: Path to the JSON design file

    Returns:
        A validated DesignDocument instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    data = _read_json(path)
    try:
        return load_design_from_dict(data)
    except ConfigError as e:
        e.path = path
        raise


def load_design_from_dict(data: Any) -> DesignDocument:
    """Load and validate a design document from a dictionary.

    Useful for documents received over HTTP or built programmatically.

    Raises:
        ConfigError: If the data fails validation.
    """
    if isinstance(data, dict) and isinstance(data.get("modelData"), dict):
        wrapper = data
        data = {**wrapper["modelData"]}
        if "name" in wrapper and "name" not in data:
            data["name"] = wrapper["name"]

    try:
        return DesignDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def load_template_from_dict(data: Any) -> TemplateConfigSchema:
    """Validate template parameters received as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return TemplateConfigSchema.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def design_to_json(document: DesignDocument, indent: int = 2) -> str:
    """Serialize a design document with the editor's camelCase keys."""
    data = document.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=indent)
