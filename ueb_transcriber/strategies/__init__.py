"""Strategy objects encapsulating reusable heuristics."""

from .markup import (  # noqa: F401
    DEFAULT_STRATEGY,
    LineKind,
    MarkupLine,
    NotesMarkupStrategy,
    classify_line,
    default_markup_strategy,
)

__all__ = [
    "NotesMarkupStrategy",
    "DEFAULT_STRATEGY",
    "LineKind",
    "MarkupLine",
    "classify_line",
    "default_markup_strategy",
]
