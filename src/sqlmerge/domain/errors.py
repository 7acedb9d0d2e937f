"""Unified domain error taxonomy for sqlmerge operations."""

from dataclasses import dataclass


@dataclass(slots=True)
class SqlMergeDomainError(Exception):
    """Base class for application/domain-level failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class InvalidParameterPayloadError(SqlMergeDomainError):
    """Raised when parameter text is not valid JSON or not a JSON array."""


class MalformedLoadPayloadError(SqlMergeDomainError):
    """Raised when a structured load payload lacks its ``sql``/``values`` fields."""


class ConfigurationError(SqlMergeDomainError):
    """Raised for invalid formatter configuration content."""
