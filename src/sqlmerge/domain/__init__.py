"""Domain types and contracts for sqlmerge workflows."""

from .errors import (
    ConfigurationError,
    InvalidParameterPayloadError,
    MalformedLoadPayloadError,
    SqlMergeDomainError,
)
from .results import CommandResult

__all__ = [
    "CommandResult",
    "SqlMergeDomainError",
    "InvalidParameterPayloadError",
    "MalformedLoadPayloadError",
    "ConfigurationError",
]
