"""
Whitespace minifier that leaves quoted regions untouched.
"""

from .quoting import scan

_NO_SPACE_AFTER = frozenset("(")
_NO_SPACE_BEFORE = frozenset("),")


def minify_sql(sql: str) -> str:
    """
    Collapse unquoted whitespace runs to a single space.

    The space is dropped entirely after ``(``, before ``)`` or ``,``, and at
    the start and end of the text.

    Example:
        >>> minify_sql("SELECT  a ,  b  FROM t")
        'SELECT a, b FROM t'
    """
    out: list[str] = []
    pending_space = False

    for step in scan(sql):
        if step.plain and step.fragment.isspace():
            pending_space = True
            continue

        if pending_space and out:
            previous = out[-1][-1]
            upcoming = step.fragment[0]
            if previous not in _NO_SPACE_AFTER and upcoming not in _NO_SPACE_BEFORE:
                out.append(" ")
        pending_space = False
        out.append(step.fragment)

    return "".join(out)
