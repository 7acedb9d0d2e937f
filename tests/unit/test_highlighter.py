"""
Unit tests for sqlmerge.core.highlighter (HTML markup).
"""

import re

import pytest

from sqlmerge.core.highlighter import escape_html, highlight_sql_markup

TAG = re.compile(r'<span class="[a-z-]+">|</span>')


def kw(text: str) -> str:
    return f'<span class="sql-keyword">{text}</span>'


def num(text: str) -> str:
    return f'<span class="sql-number">{text}</span>'


class TestHighlightSqlMarkup:
    """Tests for highlight_sql_markup."""

    def test_keywords_and_numbers(self) -> None:
        assert highlight_sql_markup("select 1") == f"{kw('SELECT')} {num('1')}"

    def test_keywords_are_upper_cased(self) -> None:
        assert highlight_sql_markup("Select a From t") == f"{kw('SELECT')} a {kw('FROM')} t"

    def test_decimal_numbers(self) -> None:
        assert highlight_sql_markup("3.14") == num("3.14")

    def test_identifiers_with_digits_are_plain(self) -> None:
        assert highlight_sql_markup("t1.col_2") == "t1.col_2"

    def test_single_quoted_string(self) -> None:
        assert highlight_sql_markup("x = 'O''Reilly'") == (
            'x = <span class="sql-string">&#x27;O&#x27;&#x27;Reilly&#x27;</span>'
        )

    def test_double_quoted_identifier(self) -> None:
        assert highlight_sql_markup('"my col"') == (
            '<span class="sql-quoted-identifier">&quot;my col&quot;</span>'
        )

    def test_backtick_identifier(self) -> None:
        assert highlight_sql_markup("`a``b`") == (
            '<span class="sql-backtick-identifier">`a``b`</span>'
        )

    def test_keywords_inside_strings_not_marked(self) -> None:
        assert highlight_sql_markup("'select 1'") == (
            '<span class="sql-string">&#x27;select 1&#x27;</span>'
        )

    def test_adjacent_word_and_string(self) -> None:
        assert highlight_sql_markup("N'x'") == 'N<span class="sql-string">&#x27;x&#x27;</span>'

    def test_unterminated_string_closed_at_end(self) -> None:
        assert highlight_sql_markup("'abc") == '<span class="sql-string">&#x27;abc</span>'

    def test_operators_escaped(self) -> None:
        assert highlight_sql_markup("a < b & c > d") == "a &lt; b &amp; c &gt; d"

    def test_empty(self) -> None:
        assert highlight_sql_markup("") == ""


@pytest.mark.parametrize(
    "sql",
    [
        "SELECT '<script>alert(\"x\")</script>' FROM t WHERE a <> b && c",
        "SELECT \"a&b\", `c<d>` , 'it''s' -- '",
        "<span class=\"sql-keyword\">SELECT</span>",
    ],
)
def test_no_unescaped_characters_outside_markup(sql: str) -> None:
    text = TAG.sub("", highlight_sql_markup(sql))
    assert not re.search(r"[<>\"']", text)
    assert not re.search(r"&(?!amp;|lt;|gt;|quot;|#x27;)", text)


def test_escape_html_covers_quotes() -> None:
    assert escape_html("&<>\"'") == "&amp;&lt;&gt;&quot;&#x27;"
