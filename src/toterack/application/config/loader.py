"""Reading quote files from disk.

A quote file is a JSON document matching QuoteConfiguration. Whatever goes
wrong while turning one into a configuration (missing file, unreadable
file, broken JSON, or a field the schema rejects) surfaces as a single
ConfigError so the CLI and the web API can report it the same way.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from toterack.application.config.schema import QuoteConfiguration

logger = logging.getLogger(__name__)

# Values of ConfigError.error_type
FILE_NOT_FOUND = "file_not_found"
PERMISSION_DENIED = "permission_denied"
FILE_READ_ERROR = "file_read_error"
JSON_PARSE = "json_parse"
VALIDATION = "validation"


class ConfigError(Exception):
    """A quote file or quote dictionary could not be turned into a configuration.

    Attributes:
        message: Human readable summary, also the ``str()`` of the error.
        error_type: One of ``file_not_found``, ``permission_denied``,
            ``file_read_error``, ``json_parse`` or ``validation``.
        path: The quote file, or None for in-memory data.
        details: One dict per problem. JSON errors carry ``line``,
            ``column`` and ``message``; schema errors carry ``path``,
            ``message``, ``value`` and ``error_type``.
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


def _field_path(loc: tuple[str | int, ...]) -> str:
    """Dotted field path with list positions in brackets.

    Examples:
        >>> _field_path(("layout", "columns"))
        'layout.columns'
        >>> _field_path(("custom_items", 0, "quantity"))
        'custom_items[0].quantity'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _field_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _describe_problems(problems: list[dict[str, Any]], source: str) -> str:
    noun = "problem" if len(problems) == 1 else "problems"
    lines = [f"Quote configuration {source}has {len(problems)} {noun}:"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        if problem.get("value") is not None:
            line += f" (got: {problem['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> QuoteConfiguration:
    try:
        return QuoteConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        source = f"{path} " if path is not None else ""
        logger.debug(f"Rejected quote configuration {source}with {len(problems)} problem(s)")
        raise ConfigError(
            message=_describe_problems(problems, source),
            error_type=VALIDATION,
            path=path,
            details=problems,
        )


def _read_quote_file(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Quote file not found: {path}",
            error_type=FILE_NOT_FOUND,
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Cannot read quote file {path}: permission denied",
            error_type=PERMISSION_DENIED,
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Cannot read quote file {path}: {e}",
            error_type=FILE_READ_ERROR,
            path=path,
        )


def load_config(path: Path) -> QuoteConfiguration:
    """Read a quote file and validate it against the schema.

    Raises:
        ConfigError: The file is missing or unreadable, is not JSON, or
            does not describe a valid quote. ``error_type`` says which.
    """
    logger.debug(f"Loading quote file {path}")
    content = _read_quote_file(path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Quote file {path} is not valid JSON: {e.msg} "
                f"at line {e.lineno}, column {e.colno}"
            ),
            error_type=JSON_PARSE,
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> QuoteConfiguration:
    """Validate an in-memory quote, such as an API request body.

    Raises:
        ConfigError: With ``error_type`` ``validation``.
    """
    return _validate(data)
