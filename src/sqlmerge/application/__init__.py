"""Application-layer services for sqlmerge."""

from .services import (
    CountService,
    FormatService,
    HighlightService,
    MergeService,
    MinifyService,
    Services,
)

__all__ = [
    "CountService",
    "FormatService",
    "HighlightService",
    "MergeService",
    "MinifyService",
    "Services",
]
