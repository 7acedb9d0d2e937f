"""Application service layer over the scanning core.

This module provides a stable orchestration surface for CLI and SDK callers.
Domain errors raised while decoding payloads or configuration are converted
into failed ``CommandResult`` values here; nothing below the CLI raises them
further.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sqlmerge.config import load_format_options
from sqlmerge.core.highlighter import highlight_sql_markup
from sqlmerge.core.minifier import minify_sql
from sqlmerge.core.placeholders import count_placeholders, merge_sql
from sqlmerge.domain.errors import SqlMergeDomainError
from sqlmerge.domain.results import CommandResult
from sqlmerge.formatters import ExternalFormatter, beautify_sql
from sqlmerge.payloads import load_payload, parse_parameters

logger = logging.getLogger(__name__)


def _failure(error: SqlMergeDomainError) -> CommandResult:
    logger.info(f"{type(error).__name__}: {error.message}")
    return CommandResult(success=False, code=error.code, message=error.message)


@dataclass(slots=True)
class CountService:
    """Count unquoted placeholders."""

    def run(self, *, sql: str) -> CommandResult:
        count = count_placeholders(sql)
        return CommandResult(
            success=True,
            code="counted",
            message=f"Detected placeholders: {count}",
            data={"placeholderCount": count},
        )


@dataclass(slots=True)
class MergeService:
    """Merge parameter values into SQL placeholders."""

    def run(self, *, sql: str, params: list[Any]) -> CommandResult:
        merged = merge_sql(sql, params)
        if merged.ok:
            return CommandResult(
                success=True,
                code="merged",
                message="Merge completed successfully.",
                data=merged.as_json_dict(),
            )
        return CommandResult(
            success=False,
            code=merged.error_code or "parameter_count_mismatch",
            message=merged.error or "",
            data=merged.as_json_dict(),
        )

    def run_with_params_text(self, *, sql: str, params_text: str) -> CommandResult:
        """Merge using a JSON array of parameters."""
        try:
            params = parse_parameters(params_text)
        except SqlMergeDomainError as e:
            return _failure(e)
        return self.run(sql=sql, params=params)

    def run_with_payload(self, *, payload_text: str) -> CommandResult:
        """Merge a structured ``{"sql": ..., "values": [...]}`` payload."""
        try:
            payload = load_payload(payload_text)
        except SqlMergeDomainError as e:
            return _failure(e)
        return self.run(sql=payload.sql, params=payload.params)


@dataclass(slots=True)
class FormatService:
    """Beautify SQL with the external formatter, falling back to the local one."""

    formatter: ExternalFormatter | None = None

    def run(
        self,
        *,
        sql: str,
        config_path: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> CommandResult:
        try:
            options = load_format_options(config_path, overrides)
        except SqlMergeDomainError as e:
            return _failure(e)

        outcome = beautify_sql(sql, options, self.formatter)
        warnings = []
        if outcome.fallback_reason:
            warnings.append(
                f"External formatter failed, used local formatter ({outcome.fallback_reason})"
            )
        return CommandResult(
            success=True,
            code="formatted",
            message=f"Formatted with {outcome.engine} formatter",
            data={"result": outcome.text, "engine": outcome.engine},
            warnings=warnings,
        )


@dataclass(slots=True)
class MinifyService:
    """Collapse unquoted whitespace."""

    def run(self, *, sql: str) -> CommandResult:
        return CommandResult(
            success=True,
            code="minified",
            message="Minified SQL",
            data={"result": minify_sql(sql)},
        )


@dataclass(slots=True)
class HighlightService:
    """Render SQL as highlighted HTML markup."""

    def run(self, *, sql: str) -> CommandResult:
        return CommandResult(
            success=True,
            code="highlighted",
            message="Highlighted SQL",
            data={"result": highlight_sql_markup(sql)},
        )


@dataclass(slots=True)
class Services:
    """Bundle of services used by the CLI; tests swap individual members."""

    count: CountService = field(default_factory=CountService)
    merge: MergeService = field(default_factory=MergeService)
    format: FormatService = field(default_factory=FormatService)
    minify: MinifyService = field(default_factory=MinifyService)
    highlight: HighlightService = field(default_factory=HighlightService)
