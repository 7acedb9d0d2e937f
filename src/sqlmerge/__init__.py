"""
sqlmerge

Python library and CLI for merging positional ``?`` parameters into SQL
text, plus quote-aware formatting, minifying and highlighting.
"""

__version__ = "0.1.0"

from .core import (
    KEYWORDS,
    MergeResult,
    count_placeholders,
    escape_value,
    format_sql,
    highlight_sql_markup,
    merge_sql,
    minify_sql,
)
from .formatters import BeautifyOutcome, beautify_sql
from .models import FormatOptions, MergePayload
from .payloads import load_payload, parse_parameters

__all__ = [
    "__version__",
    "KEYWORDS",
    "MergeResult",
    "count_placeholders",
    "escape_value",
    "format_sql",
    "highlight_sql_markup",
    "merge_sql",
    "minify_sql",
    "BeautifyOutcome",
    "beautify_sql",
    "FormatOptions",
    "MergePayload",
    "load_payload",
    "parse_parameters",
]
