"""
Local SQL beautifier.

Two passes: a quote-aware keyword casing scan, then an ordered list of
regex layout rules applied to the cased text. The layout rules only match
upper-case canonical keywords, which the casing pass produces outside quoted
regions. Upper-case clause keywords already present inside a quoted literal
are still matched by the layout rules.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from .keywords import CLAUSE_PHRASES, LOGICAL_OPERATORS, is_keyword, is_word_char
from .quoting import scan

Replacement = str | Callable[[re.Match[str]], str]


@dataclass(frozen=True, slots=True)
class LayoutRule:
    """One substitution step of the layout pass."""

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _phrase_pattern(phrase: str) -> str:
    return r"\s+".join(re.escape(word) for word in phrase.split())


def _alternation(phrases: tuple[str, ...]) -> str:
    return "|".join(_phrase_pattern(phrase) for phrase in phrases)


def _break_before_clause(match: re.Match[str]) -> str:
    return "\n" + " ".join(match.group(1).split())


LAYOUT_RULES: tuple[LayoutRule, ...] = (
    LayoutRule("normalize_newlines", re.compile(r"\r\n?"), "\n"),
    LayoutRule("collapse_horizontal_whitespace", re.compile(r"[^\S\n]+"), " "),
    LayoutRule("trim_line_edges", re.compile(r" ?\n ?"), "\n"),
    LayoutRule("trim_text_edges", re.compile(r"^\s+|\s+$"), ""),
    LayoutRule(
        "break_before_clauses",
        re.compile(r"\s*\b(" + _alternation(CLAUSE_PHRASES) + r")\b"),
        _break_before_clause,
    ),
    LayoutRule(
        "indent_logical_operators",
        re.compile(r"\s*\b(" + _alternation(LOGICAL_OPERATORS) + r")\b *"),
        r"\n  \1 ",
    ),
    LayoutRule("collapse_blank_lines", re.compile(r"\n{3,}"), "\n\n"),
    LayoutRule("trim_result", re.compile(r"^\s+|\s+$"), ""),
)


def case_keywords(sql: str) -> str:
    """Upper-case keywords outside quoted regions; everything else is kept as typed."""
    out: list[str] = []
    word: list[str] = []

    def flush() -> None:
        if word:
            text = "".join(word)
            out.append(text.upper() if is_keyword(text) else text)
            word.clear()

    for step in scan(sql):
        if step.plain and is_word_char(step.fragment):
            word.append(step.fragment)
            continue
        flush()
        out.append(step.fragment)
    flush()
    return "".join(out)


def apply_layout(sql: str, rules: tuple[LayoutRule, ...] = LAYOUT_RULES) -> str:
    """Run the layout rules, in order, over keyword-cased SQL."""
    for rule in rules:
        sql = rule.apply(sql)
    return sql


def format_sql(sql: str) -> str:
    """
    Beautify SQL: upper-case keywords, normalise whitespace and put each
    major clause on its own line with ``AND``/``OR`` indented beneath it.

    Example:
        >>> format_sql("select a from t where x = 1 and y = 2")
        'SELECT a\\nFROM t\\nWHERE x = 1\\n  AND y = 2'
    """
    return apply_layout(case_keywords(sql))
