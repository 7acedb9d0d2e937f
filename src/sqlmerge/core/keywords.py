"""
SQL keyword vocabulary shared by the formatter and the highlighter.
"""

KEYWORDS: frozenset[str] = frozenset(
    {
        # Query clauses
        "SELECT",
        "DISTINCT",
        "FROM",
        "WHERE",
        "GROUP",
        "ORDER",
        "BY",
        "HAVING",
        "LIMIT",
        "OFFSET",
        "FETCH",
        "UNION",
        "ALL",
        "INTERSECT",
        "EXCEPT",
        "WITH",
        "RECURSIVE",
        "AS",
        "ASC",
        "DESC",
        "NULLS",
        "FIRST",
        "LAST",
        # Joins
        "JOIN",
        "INNER",
        "LEFT",
        "RIGHT",
        "FULL",
        "OUTER",
        "CROSS",
        "NATURAL",
        "ON",
        "USING",
        # Logical and comparison
        "AND",
        "OR",
        "NOT",
        "IN",
        "IS",
        "NULL",
        "LIKE",
        "ILIKE",
        "BETWEEN",
        "EXISTS",
        "ANY",
        "SOME",
        "TRUE",
        "FALSE",
        # Expressions
        "CASE",
        "WHEN",
        "THEN",
        "ELSE",
        "END",
        "CAST",
        "OVER",
        "PARTITION",
        "WINDOW",
        # DML
        "INSERT",
        "INTO",
        "VALUES",
        "UPDATE",
        "SET",
        "DELETE",
        "RETURNING",
        "MERGE",
        # DDL
        "CREATE",
        "ALTER",
        "DROP",
        "TABLE",
        "VIEW",
        "INDEX",
        "PRIMARY",
        "KEY",
        "FOREIGN",
        "REFERENCES",
        "DEFAULT",
        "CONSTRAINT",
        "UNIQUE",
        "CHECK",
        "IF",
    }
)

# Clause phrases that start a new line in the local formatter. Order is the
# match priority: every phrase precedes any shorter phrase it contains.
CLAUSE_PHRASES: tuple[str, ...] = (
    "UNION ALL",
    "UNION",
    "INTERSECT",
    "EXCEPT",
    "WITH",
    "INSERT INTO",
    "DELETE FROM",
    "SELECT",
    "FROM",
    "WHERE",
    "LEFT OUTER JOIN",
    "RIGHT OUTER JOIN",
    "FULL OUTER JOIN",
    "LEFT JOIN",
    "RIGHT JOIN",
    "FULL JOIN",
    "INNER JOIN",
    "CROSS JOIN",
    "NATURAL JOIN",
    "JOIN",
    "GROUP BY",
    "ORDER BY",
    "HAVING",
    "LIMIT",
    "OFFSET",
    "VALUES",
    "UPDATE",
    "SET",
    "RETURNING",
)

LOGICAL_OPERATORS: tuple[str, ...] = ("AND", "OR")


def is_keyword(word: str) -> bool:
    """Case-insensitive membership test against ``KEYWORDS``."""
    return word.upper() in KEYWORDS


def is_word_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"
