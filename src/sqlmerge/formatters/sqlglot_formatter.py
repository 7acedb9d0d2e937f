"""
SQLGlot-backed external formatter.

Uses SQLGlot's pretty printer as the preferred beautifier. The call runs in a
worker thread bounded by ``FormatOptions.timeout_seconds``; every failure is
returned as an ``ExternalFormatResult`` error instead of being raised.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any

import sqlglot
from sqlglot.errors import ErrorLevel

from sqlmerge.models import FormatOptions

from .contracts import ExternalFormatResult

logger = logging.getLogger(__name__)

STATEMENT_SEPARATOR = ";\n\n"


def generator_options(options: FormatOptions) -> dict[str, Any]:
    """
    Translate FormatOptions into SQLGlot generator keyword arguments.

    SQLGlot's pretty mode always expands select lists and puts joins on their
    own lines, so ``expand_comma_lists`` and ``break_joins`` have no
    counterpart here.
    """
    return {
        "pretty": True,
        "pad": options.indent_width,
        "indent": options.indent_width,
        "max_text_width": options.max_line_width,
        "normalize_functions": "upper" if options.uppercase_keywords else False,
    }


class SqlglotFormatter:
    """Pretty-print SQL with SQLGlot."""

    name = "sqlglot"

    def is_available(self) -> bool:
        return True

    def _transpile(self, sql: str, options: FormatOptions) -> str:
        statements = sqlglot.transpile(
            sql,
            read=options.dialect,
            write=options.dialect,
            error_level=ErrorLevel.RAISE,
            **generator_options(options),
        )
        return STATEMENT_SEPARATOR.join(statements)

    def format(self, sql: str, options: FormatOptions) -> ExternalFormatResult:
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sqlglot-format")
        try:
            future = pool.submit(self._transpile, sql, options)
            text = future.result(timeout=options.timeout_seconds)
        except FutureTimeoutError:
            logger.debug(f"sqlglot formatting timed out after {options.timeout_seconds}s")
            return ExternalFormatResult(
                error=f"sqlglot timed out after {options.timeout_seconds}s"
            )
        except Exception as e:
            # SQLGlot raises ParseError/TokenError and occasionally plain
            # ValueError for input it cannot handle
            logger.debug(f"sqlglot could not format SQL: {e}")
            return ExternalFormatResult(error=f"sqlglot error: {e}")
        finally:
            pool.shutdown(wait=False, cancel_futures=True)

        if not text.strip():
            return ExternalFormatResult(error="sqlglot produced no output")
        return ExternalFormatResult(text=text)
