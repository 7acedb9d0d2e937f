"""
Conversion of parameter values into SQL literal text.
"""

import json
import math
from decimal import Decimal
from numbers import Real
from typing import Any

ParameterValue = Any


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, Real) and math.isfinite(value)


def _textual(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def quote_string(text: str) -> str:
    """Wrap text in single quotes, doubling embedded single quotes."""
    return "'" + text.replace("'", "''") + "'"


def escape_value(value: ParameterValue) -> str:
    """
    Render one parameter value as a SQL literal.

    Only single quotes are escaped: the result is always a value literal,
    never an identifier.

    Args:
        value: Decoded parameter (None, bool, number, string or anything else)

    Returns:
        SQL literal text, e.g. ``NULL``, ``TRUE``, ``42`` or ``'O''Reilly'``
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if _is_finite_number(value):
        return str(value)
    return quote_string(_textual(value))
