"""Corpus file loader and writer.

Loads and parses JSON corpus files, turning file system errors, JSON parsing
errors and Pydantic validation errors into a single ``ConfigError`` with an
actionable message.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from corpus.application.config.schema import CorpusConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for corpus file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the corpus file (if applicable)
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("panels", 2, "thickness"))
        'panels[2].thickness'
        >>> _format_json_path(())
        ''
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
    """Flatten a Pydantic ValidationError into path/message/value dicts."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]) or "(root)",
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Corpus file validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        # Whole-object inputs (model validators) are too noisy to echo back.
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_config(path: Path) -> CorpusConfiguration:
    """Load and validate a corpus file.

    Args:
        path: Path to the JSON corpus file

    Returns:
        A validated CorpusConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute tells which.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Corpus file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading corpus file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading corpus file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in corpus file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    try:
        config = CorpusConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )
    logger.debug(f"Loaded {len(config.panels)} panels from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> CorpusConfiguration:
    """Load and validate a corpus configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return CorpusConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def save_config(config: CorpusConfiguration, path: Path) -> None:
    """Write a corpus configuration as pretty-printed JSON.

    Parent directories are created as needed.

    Raises:
        ConfigError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(config.model_dump(mode="json"), indent=2) + "\n",
            encoding="utf-8",
        )
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied writing corpus file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error writing corpus file: {path}: {e}",
            error_type="file_write_error",
            path=path,
        )
    logger.info(f"Saved {len(config.panels)} panels to {path}")
