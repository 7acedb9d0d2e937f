"""Shared helpers for sqlmerge tests."""

from .cli_helpers import invoke_cli

__all__ = ["invoke_cli"]
