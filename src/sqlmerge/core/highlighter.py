"""
HTML markup highlighter for SQL display.

Every piece of source text is HTML-escaped; the only raw markup emitted is
the ``<span>`` wrappers produced here.
"""

from __future__ import annotations

import html

from .keywords import is_digit, is_keyword, is_word_char, is_word_start
from .quoting import QuoteKind, scan

KEYWORD_CLASS = "sql-keyword"
NUMBER_CLASS = "sql-number"
QUOTE_CLASSES: dict[QuoteKind, str] = {
    QuoteKind.SINGLE: "sql-string",
    QuoteKind.DOUBLE: "sql-quoted-identifier",
    QuoteKind.BACKTICK: "sql-backtick-identifier",
}


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe inclusion in markup."""
    return html.escape(text, quote=True)


def _span(css_class: str, text: str) -> str:
    return f'<span class="{css_class}">{escape_html(text)}</span>'


class _MarkupBuilder:
    """Accumulates markup while tracking the open word/number/quoted token."""

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.token: list[str] = []
        self.token_is_number = False
        self.quoted: list[str] = []
        self.quote_kind: QuoteKind | None = None

    def flush_token(self) -> None:
        if not self.token:
            return
        text = "".join(self.token)
        if self.token_is_number:
            self.parts.append(_span(NUMBER_CLASS, text))
        elif is_keyword(text):
            self.parts.append(_span(KEYWORD_CLASS, text.upper()))
        else:
            self.parts.append(escape_html(text))
        self.token.clear()

    def flush_quoted(self) -> None:
        if self.quote_kind is None:
            return
        self.parts.append(_span(QUOTE_CLASSES[self.quote_kind], "".join(self.quoted)))
        self.quoted.clear()
        self.quote_kind = None

    def add_plain(self, char: str) -> None:
        if self.token:
            if self.token_is_number:
                continues = is_digit(char) or char == "."
            else:
                continues = is_word_char(char)
            if continues:
                self.token.append(char)
                return
            self.flush_token()

        if is_digit(char):
            self.token_is_number = True
            self.token.append(char)
        elif is_word_start(char):
            self.token_is_number = False
            self.token.append(char)
        else:
            self.parts.append(escape_html(char))

    def result(self) -> str:
        self.flush_token()
        self.flush_quoted()
        return "".join(self.parts)


def highlight_sql_markup(sql: str) -> str:
    """
    Render SQL as HTML with keyword, number and quoted-region spans.

    Args:
        sql: SQL text to render

    Returns:
        HTML fragment; quoted regions keep their delimiters and escape pairs,
        keywords are upper-cased, all other text is escaped as-is
    """
    builder = _MarkupBuilder()
    for step in scan(sql):
        if step.plain:
            builder.add_plain(step.fragment)
            continue

        if step.opens:
            builder.flush_token()
            builder.quote_kind = step.after.active
        builder.quoted.append(step.fragment)
        if step.closes:
            builder.flush_quoted()
    return builder.result()
