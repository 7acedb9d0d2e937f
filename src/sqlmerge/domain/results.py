"""Typed service result used by CLI and SDK entrypoints."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class CommandResult:
    """Common service response payload.

    A failed result may still carry data: a merge with mismatched parameter
    counts reports ``success=False`` alongside the partially merged SQL.
    """

    success: bool
    code: str = "ok"
    message: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def output(self) -> str | None:
        """Primary text output of the command, when there is one."""
        value = self.data.get("result")
        return value if isinstance(value, str) else None

    def as_json_dict(self) -> dict[str, Any]:
        """Return a stable machine-readable structure."""
        return {
            "success": self.success,
            "code": self.code,
            "message": self.message,
            "data": self.data,
            "warnings": self.warnings,
        }
