"""External formatter capability contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sqlmerge.models import FormatOptions


@dataclass(frozen=True, slots=True)
class ExternalFormatResult:
    """Either formatted text or the reason the external formatter gave up."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None


@runtime_checkable
class ExternalFormatter(Protocol):
    """Best-effort third-party beautifier."""

    name: str

    def is_available(self) -> bool: ...

    def format(self, sql: str, options: FormatOptions) -> ExternalFormatResult: ...


class AbsentFormatter:
    """Stand-in used when no external formatter should be consulted."""

    name = "absent"

    def is_available(self) -> bool:
        return False

    def format(self, sql: str, options: FormatOptions) -> ExternalFormatResult:
        del sql, options
        return ExternalFormatResult(error="No external formatter configured")
