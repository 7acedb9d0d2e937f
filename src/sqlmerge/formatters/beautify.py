"""
Beautify pipeline: external formatter first, local formatter as fallback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlmerge.core.formatter import format_sql
from sqlmerge.models import FormatOptions

from .contracts import AbsentFormatter, ExternalFormatter
from .sqlglot_formatter import SqlglotFormatter

logger = logging.getLogger(__name__)

LOCAL_ENGINE = "local"


@dataclass(frozen=True, slots=True)
class BeautifyOutcome:
    """Formatted SQL and the name of the engine that produced it."""

    text: str
    engine: str
    fallback_reason: str | None = None


def default_formatter() -> ExternalFormatter:
    return SqlglotFormatter()


def resolve_formatter(
    options: FormatOptions, formatter: ExternalFormatter | None = None
) -> ExternalFormatter:
    """Pick the external formatter for ``options.engine``."""
    if options.engine == LOCAL_ENGINE:
        return AbsentFormatter()
    return formatter if formatter is not None else default_formatter()


def beautify_sql(
    sql: str,
    options: FormatOptions | None = None,
    formatter: ExternalFormatter | None = None,
) -> BeautifyOutcome:
    """
    Beautify SQL, preferring the external formatter when one is available.

    An unavailable or failing external formatter never surfaces as an error:
    the local formatter's output is returned instead, with the reason kept on
    the outcome for diagnostics.

    Args:
        sql: SQL text to format
        options: Formatting preferences (defaults apply when omitted)
        formatter: External formatter override (SQLGlot by default)

    Returns:
        BeautifyOutcome with the formatted text and the engine used
    """
    options = options or FormatOptions()
    external = resolve_formatter(options, formatter)

    if not external.is_available():
        return BeautifyOutcome(text=format_sql(sql), engine=LOCAL_ENGINE)

    result = external.format(sql, options)
    if result.ok and result.text is not None:
        return BeautifyOutcome(text=result.text, engine=external.name)

    logger.debug(f"Falling back to local formatter: {result.error}")
    return BeautifyOutcome(
        text=format_sql(sql),
        engine=LOCAL_ENGINE,
        fallback_reason=result.error,
    )
