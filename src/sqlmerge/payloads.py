"""
Decoding of user-supplied parameter arrays and structured merge payloads.
"""

import json
from typing import Any

from pydantic import ValidationError

from .core.escaping import ParameterValue
from .domain.errors import InvalidParameterPayloadError, MalformedLoadPayloadError
from .models import MergePayload

EXAMPLE_SQL = "SELECT * FROM abc WHERE abc.id = ? AND abc.anotherId IN (?, ?)"
EXAMPLE_PARAMS = '["784", 123, 456]'


def parse_parameters(text: str) -> list[ParameterValue]:
    """
    Decode a JSON array of parameter values.

    Args:
        text: JSON text, e.g. ``["784", 123, null]``

    Returns:
        Ordered list of decoded values

    Raises:
        InvalidParameterPayloadError: If the text is not JSON or not an array
    """
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidParameterPayloadError(
            message=(
                f"Invalid JSON ({e.msg} at line {e.lineno} column {e.colno}). "
                f"Ensure it's a valid array like: {EXAMPLE_PARAMS}"
            ),
            code="invalid_json",
        ) from e

    if not isinstance(decoded, list):
        raise InvalidParameterPayloadError(
            message="Parameters input must be a JSON array.",
            code="not_an_array",
        )
    return decoded


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "payload"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def load_payload(text: str) -> MergePayload:
    """
    Decode a structured payload carrying ``sql`` text and a ``values`` array.

    Raises:
        MalformedLoadPayloadError: If the text is not a JSON object with both fields
    """
    try:
        decoded: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedLoadPayloadError(
            message=f"Payload is not valid JSON: {e.msg}",
            code="invalid_json",
        ) from e

    if not isinstance(decoded, dict):
        raise MalformedLoadPayloadError(
            message='Payload must be a JSON object with "sql" and "values" fields.',
            code="not_an_object",
        )

    try:
        return MergePayload.model_validate(decoded)
    except ValidationError as e:
        raise MalformedLoadPayloadError(
            message=f"Malformed payload: {_describe_validation_error(e)}",
            code="missing_fields",
        ) from e
