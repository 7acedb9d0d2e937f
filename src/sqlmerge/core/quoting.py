"""
Quote-state tracking shared by every SQL text scanner.

A single pure transition function decides, one position at a time, whether
the scan is inside a single-quoted string, a double-quoted identifier, a
back-tick identifier, or plain SQL. Doubled quote characters inside a region
of the same kind (``''``, ``""``, ````````) are escapes, not terminators.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class QuoteKind(str, Enum):
    """Quote delimiters recognised by the scanner."""

    SINGLE = "'"
    DOUBLE = '"'
    BACKTICK = "`"


_KIND_BY_CHAR = {kind.value: kind for kind in QuoteKind}


@dataclass(frozen=True, slots=True)
class QuoteState:
    """Which quoted region (if any) the scan is currently in."""

    in_single: bool = False
    in_double: bool = False
    in_backtick: bool = False

    @property
    def active(self) -> QuoteKind | None:
        if self.in_single:
            return QuoteKind.SINGLE
        if self.in_double:
            return QuoteKind.DOUBLE
        if self.in_backtick:
            return QuoteKind.BACKTICK
        return None

    @property
    def inside(self) -> bool:
        return self.active is not None

    def admits(self, kind: QuoteKind) -> bool:
        """True when a ``kind`` delimiter is significant (not inside another kind)."""
        active = self.active
        return active is None or active is kind

    def toggled(self, kind: QuoteKind) -> QuoteState:
        if kind is QuoteKind.SINGLE:
            return QuoteState(in_single=not self.in_single)
        if kind is QuoteKind.DOUBLE:
            return QuoteState(in_double=not self.in_double)
        return QuoteState(in_backtick=not self.in_backtick)


UNQUOTED = QuoteState()


@dataclass(frozen=True, slots=True)
class ScanStep:
    """One transition of the scanner.

    ``fragment`` is the text covered by the step: a single character, or both
    characters of an escape pair.
    """

    start: int
    fragment: str
    before: QuoteState
    after: QuoteState
    escape: bool = False

    @property
    def consumed(self) -> int:
        return len(self.fragment)

    @property
    def quoted(self) -> bool:
        """Delimiter, escape pair or content of a quoted region."""
        return self.before.inside or self.after.inside

    @property
    def plain(self) -> bool:
        return not self.quoted

    @property
    def opens(self) -> bool:
        return not self.before.inside and self.after.inside

    @property
    def closes(self) -> bool:
        return self.before.inside and not self.after.inside


def advance(text: str, pos: int, state: QuoteState) -> ScanStep:
    """Compute the scan step starting at ``pos`` given the current quote state.

    Args:
        text: SQL text being scanned
        pos: Index of the current character (must be inside ``text``)
        state: Quote state before the current character

    Returns:
        The step covering the current character (and the next one when the
        pair is an escaped quote), with the updated quote state.
    """
    char = text[pos]
    kind = _KIND_BY_CHAR.get(char)
    if kind is None or not state.admits(kind):
        return ScanStep(pos, char, state, state)

    if state.active is kind and text.startswith(char, pos + 1):
        return ScanStep(pos, char * 2, state, state, escape=True)

    return ScanStep(pos, char, state, state.toggled(kind))


def scan(text: str) -> Iterator[ScanStep]:
    """Yield successive scan steps over ``text`` starting unquoted."""
    pos = 0
    state = UNQUOTED
    while pos < len(text):
        step = advance(text, pos, state)
        yield step
        pos += step.consumed
        state = step.after
