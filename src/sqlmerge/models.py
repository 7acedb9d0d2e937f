"""
Pydantic models for sqlmerge configuration and payloads.

JSON documents use camelCase keys; Python attributes are snake_case.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Engine = Literal["auto", "local"]


class FormatOptions(BaseModel):
    """Beautifier preferences. All knobs are advisory layout preferences."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    indent_width: int = Field(2, alias="indentWidth", ge=0, le=16)
    max_line_width: int = Field(80, alias="maxLineWidth", ge=20)
    expand_comma_lists: bool = Field(True, alias="expandCommaLists")
    uppercase_keywords: bool = Field(True, alias="uppercaseKeywords")
    break_joins: bool = Field(True, alias="breakJoins")
    dialect: Optional[str] = None  # sqlglot dialect name, e.g. "postgres"
    timeout_seconds: float = Field(2.0, alias="timeoutSeconds", gt=0)
    engine: Engine = "auto"


class MergePayload(BaseModel):
    """Structured merge request: SQL text plus its ordered parameter values."""

    model_config = ConfigDict(populate_by_name=True)

    sql: str
    params: list[Any] = Field(..., alias="values")
