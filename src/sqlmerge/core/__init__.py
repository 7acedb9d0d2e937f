"""
SQL text scanning core.

Pure, synchronous transformations built on one quote-aware scanner:
placeholder counting and merging, keyword formatting, minifying and
HTML highlighting. Nothing here performs I/O or depends on the CLI layer.
"""

from .escaping import ParameterValue, escape_value, quote_string
from .formatter import LAYOUT_RULES, LayoutRule, apply_layout, case_keywords, format_sql
from .highlighter import escape_html, highlight_sql_markup
from .keywords import CLAUSE_PHRASES, KEYWORDS, is_keyword
from .minifier import minify_sql
from .placeholders import (
    NOT_ENOUGH_PARAMETERS,
    TOO_MANY_PARAMETERS,
    MergeResult,
    count_placeholders,
    merge_sql,
)
from .quoting import UNQUOTED, QuoteKind, QuoteState, ScanStep, advance, scan

__all__ = [
    "ParameterValue",
    "escape_value",
    "quote_string",
    "LAYOUT_RULES",
    "LayoutRule",
    "apply_layout",
    "case_keywords",
    "format_sql",
    "escape_html",
    "highlight_sql_markup",
    "CLAUSE_PHRASES",
    "KEYWORDS",
    "is_keyword",
    "minify_sql",
    "MergeResult",
    "NOT_ENOUGH_PARAMETERS",
    "TOO_MANY_PARAMETERS",
    "count_placeholders",
    "merge_sql",
    "UNQUOTED",
    "QuoteKind",
    "QuoteState",
    "ScanStep",
    "advance",
    "scan",
]
