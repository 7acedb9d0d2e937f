"""Typed command envelope builders shared by CLI JSON commands."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

from .results import CommandResult


@dataclass(slots=True, frozen=True)
class EnvelopeError:
    """Machine-readable error entry for command envelopes."""

    code: str
    message: str
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


@dataclass(slots=True, frozen=True)
class EnvelopeMeta:
    """Execution metadata shared by all command envelopes."""

    duration_ms: int
    executed_command: str
    exit_code: int

    @classmethod
    def since(cls, started: float, *, command: str, exit_code: int) -> EnvelopeMeta:
        """Build metadata from a ``time.perf_counter()`` start mark."""
        elapsed = int((time.perf_counter() - started) * 1000)
        return cls(duration_ms=elapsed, executed_command=command, exit_code=exit_code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "durationMs": self.duration_ms,
            "executedCommand": self.executed_command,
            "exitCode": self.exit_code,
        }


@dataclass(slots=True, frozen=True)
class CommandEnvelope:
    """Standardized command envelope structure for CLI JSON output."""

    command: str
    status: str
    data: Any
    warnings: list[str]
    errors: list[EnvelopeError]
    meta: EnvelopeMeta
    schema_version: str = "1"

    def to_dict(self) -> dict[str, Any]:
        return {
            "schemaVersion": self.schema_version,
            "command": self.command,
            "status": self.status,
            "data": self.data,
            "warnings": self.warnings,
            "errors": [error.to_dict() for error in self.errors],
            "meta": self.meta.to_dict(),
        }


def build_result_envelope(
    *,
    command: str,
    result: CommandResult,
    meta: EnvelopeMeta,
) -> dict[str, Any]:
    """Build a success or error envelope from a service result.

    Failed results keep their data so partial merges stay visible to callers.
    """
    errors = [] if result.success else [EnvelopeError(code=result.code, message=result.message)]
    envelope = CommandEnvelope(
        command=command,
        status="success" if result.success else "error",
        data=result.data,
        warnings=list(result.warnings),
        errors=errors,
        meta=meta,
    )
    return envelope.to_dict()
