"""
Formatter backends.

The local formatter lives in ``sqlmerge.core.formatter``; this package adds
the optional external beautifier and the fallback pipeline between them.
"""

from .beautify import LOCAL_ENGINE, BeautifyOutcome, beautify_sql, resolve_formatter
from .contracts import AbsentFormatter, ExternalFormatResult, ExternalFormatter
from .sqlglot_formatter import SqlglotFormatter

__all__ = [
    "AbsentFormatter",
    "BeautifyOutcome",
    "ExternalFormatResult",
    "ExternalFormatter",
    "LOCAL_ENGINE",
    "SqlglotFormatter",
    "beautify_sql",
    "resolve_formatter",
]
