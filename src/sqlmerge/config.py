"""
Formatter configuration loading.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .domain.errors import ConfigurationError
from .models import FormatOptions


def read_config_file(config_path: Path) -> dict[str, Any]:
    """Read a JSON config file into a dictionary"""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                message=f"Config file {config_path} is not valid JSON: {e.msg}",
                code="invalid_config",
            ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Config file {config_path} must contain a JSON object",
            code="invalid_config",
        )
    return data


def _json_key(key: str) -> str:
    """Map a snake_case attribute name to its camelCase alias (if any)."""
    field = FormatOptions.model_fields.get(key)
    if field is not None and field.alias:
        return field.alias
    return key


def load_format_options(
    config_path: Path | None = None, overrides: dict[str, Any] | None = None
) -> FormatOptions:
    """
    Build FormatOptions from an optional config file plus explicit overrides.

    Overrides use Python attribute names and skip ``None`` values, so unset
    CLI flags never mask file settings.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist
        ConfigurationError: If the merged settings fail validation
    """
    data: dict[str, Any] = read_config_file(config_path) if config_path else {}
    options_data = {_json_key(key): value for key, value in data.items()}
    for key, value in (overrides or {}).items():
        if value is not None:
            options_data[_json_key(key)] = value

    try:
        return FormatOptions.model_validate(options_data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            message=f"Invalid formatter option {location}: {first['msg']}",
            code="invalid_config",
        ) from e
