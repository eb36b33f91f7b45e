"""JSON option file loading for nuget-license."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, TypeVar

from pydantic import TypeAdapter, ValidationError

from nuget_license.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MAPPING_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


def load_json_file(option: str, path: str) -> Any:
    """Read and parse a JSON option file.

    Args:
        option: Name of the option the path came from.
        path: Path of the JSON file.

    Returns:
        The parsed JSON value.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid JSON.
    """
    logger.debug("Loading %s from '%s'", option, path)
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read {option} file '{path}': {e}",
            option=option,
            source=path,
        ) from e

    try:
        return json.loads(content)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ConfigurationError(
            f"Invalid JSON in {option} file '{path}': {e}",
            option=option,
            source=path,
        ) from e


def read_list_from_file(option: str, path: str, item_type: type[T]) -> list[T]:
    """Load a JSON array of ``item_type`` values from a file.

    Args:
        option: Name of the option the path came from.
        path: Path of the JSON file.
        item_type: Type every element is validated against.

    Returns:
        Validated list of elements in file order.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or is not an array of ``item_type``.
    """
    data = load_json_file(option, path)
    if not isinstance(data, list):
        raise ConfigurationError(
            f"Invalid {option} file '{path}': "
            f"expected a JSON array, got {type(data).__name__}",
            option=option,
            source=path,
        )

    try:
        return TypeAdapter(list[item_type]).validate_python(data)  # type: ignore[valid-type]
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {option} file '{path}': {_format_validation_errors(e)}",
            option=option,
            source=path,
        ) from e


def read_mapping_from_file(option: str, path: str) -> dict[str, str]:
    """Load a JSON object of string to string from a file.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or is not an object with string values.
    """
    data = load_json_file(option, path)
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid {option} file '{path}': "
            f"expected a JSON object, got {type(data).__name__}",
            option=option,
            source=path,
        )

    try:
        return _MAPPING_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {option} file '{path}': {_format_validation_errors(e)}",
            option=option,
            source=path,
        ) from e


def merge_mappings(
    defaults: Mapping[str, str], overrides: Mapping[str, str]
) -> dict[str, str]:
    """Merge ``overrides`` on top of a copy of ``defaults``."""
    merged = dict(defaults)
    merged.update(overrides)
    return merged


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)
