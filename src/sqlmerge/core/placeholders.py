"""
Placeholder counting and parameter merging.

Only ``?`` characters outside quoted regions are placeholders. Count
mismatches are reported in the returned ``MergeResult``, never raised.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .escaping import ParameterValue, escape_value
from .quoting import scan

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"

TOO_MANY_PARAMETERS = "too_many_parameters"
NOT_ENOUGH_PARAMETERS = "not_enough_parameters"


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Outcome of one merge: the (possibly partial) SQL plus counters."""

    result: str
    used_count: int
    placeholder_count: int
    error: str | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_json_dict(self) -> dict[str, Any]:
        return {
            "result": self.result,
            "error": self.error,
            "errorCode": self.error_code,
            "usedCount": self.used_count,
            "placeholderCount": self.placeholder_count,
        }


def count_placeholders(sql: str) -> int:
    """Count unquoted ``?`` placeholders in ``sql``."""
    return sum(1 for step in scan(sql) if step.plain and step.fragment == PLACEHOLDER)


def merge_sql(sql: str, params: Sequence[ParameterValue]) -> MergeResult:
    """
    Substitute each unquoted placeholder with the next escaped parameter.

    Placeholders left over once ``params`` is exhausted stay as ``?``.
    Quoted regions, escape pairs included, are copied verbatim.

    Args:
        sql: SQL text with ``?`` placeholders
        params: Ordered parameter values

    Returns:
        MergeResult carrying the merged text, the used and placeholder counts,
        and an error message when the counts do not match
    """
    out: list[str] = []
    used = 0
    placeholders = 0

    for step in scan(sql):
        if step.plain and step.fragment == PLACEHOLDER:
            placeholders += 1
            if used < len(params):
                out.append(escape_value(params[used]))
                used += 1
            else:
                out.append(PLACEHOLDER)
            continue
        out.append(step.fragment)

    merged = "".join(out)
    logger.debug(
        f"Merged {used}/{len(params)} parameter(s) into {placeholders} placeholder(s)"
    )

    if used < len(params):
        return MergeResult(
            result=merged,
            used_count=used,
            placeholder_count=placeholders,
            error=f"Too many parameters: provided {len(params)}, used {used}.",
            error_code=TOO_MANY_PARAMETERS,
        )
    if used < placeholders:
        return MergeResult(
            result=merged,
            used_count=used,
            placeholder_count=placeholders,
            error=(
                f"Not enough parameters: placeholders={placeholders}, "
                f"provided={len(params)}."
            ),
            error_code=NOT_ENOUGH_PARAMETERS,
        )
    return MergeResult(result=merged, used_count=used, placeholder_count=placeholders)
