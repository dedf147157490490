"""Line-level markup heuristics for academic notes packaged as a pure strategy."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Pattern, Tuple


class LineKind(str, Enum):
    BLANK = "blank"
    TITLE = "title"
    HEADING = "heading"
    BULLET = "bullet"
    NUMBERED = "numbered"
    PLAIN = "plain"


@dataclass(frozen=True)
class MarkupLine:
    """A trimmed source line with its recognized structure.

    ``body`` is the text left after the structural marker; ``number`` is
    only set for numbered items.
    """

    kind: LineKind
    body: str
    number: str | None = None


@dataclass(frozen=True)
class NotesMarkupStrategy:
    """Recognize titles, headings, bullets and numbered items in note lines."""

    title_prefix: str = "# "
    heading_prefix: str = "## "
    bullet_prefixes: Tuple[str, ...] = ("* ", "- ")
    numbered_pattern: str = r"^(?P<number>\d+)\.\s(?P<body>.+)$"
    numbered_start_re: Pattern[str] = field(init=False)
    numbered_re: Pattern[str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "numbered_start_re",
            re.compile(r"^\d+\.\s", re.ASCII),
        )
        object.__setattr__(
            self,
            "numbered_re",
            re.compile(self.numbered_pattern, re.ASCII),
        )

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------
    def is_title(self, line: str) -> bool:
        return line.startswith(self.title_prefix)

    def is_heading(self, line: str) -> bool:
        return line.startswith(self.heading_prefix)

    def is_bullet(self, line: str) -> bool:
        return line.startswith(self.bullet_prefixes)

    def starts_with_number(self, line: str) -> bool:
        return bool(self.numbered_start_re.match(line))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def numbered_parts(self, line: str) -> Tuple[str, str] | None:
        """Return ``(number, body)`` for a numbered item with text."""

        if not self.starts_with_number(line):
            return None
        match = self.numbered_re.match(line)
        return (match.group("number"), match.group("body")) if match else None

    def classify(self, raw: str) -> MarkupLine:
        """Trim ``raw`` and return its structure.

        Checks run in a fixed order: blank, title, heading, bullet, numbered,
        then plain. A numbered marker without item text is treated as plain.
        """

        line = raw.strip()
        if not line:
            return MarkupLine(LineKind.BLANK, "")
        if self.is_title(line):
            return MarkupLine(LineKind.TITLE, line[len(self.title_prefix) :])
        if self.is_heading(line):
            return MarkupLine(LineKind.HEADING, line[len(self.heading_prefix) :])
        if self.is_bullet(line):
            prefix = next(p for p in self.bullet_prefixes if line.startswith(p))
            return MarkupLine(LineKind.BULLET, line[len(prefix) :])
        parts = self.numbered_parts(line)
        if parts is not None:
            number, body = parts
            return MarkupLine(LineKind.NUMBERED, body, number)
        return MarkupLine(LineKind.PLAIN, line)


DEFAULT_STRATEGY = NotesMarkupStrategy()


def default_markup_strategy() -> NotesMarkupStrategy:
    """Return the immutable default notes markup strategy."""

    return DEFAULT_STRATEGY


def classify_line(raw: str, strategy: NotesMarkupStrategy | None = None) -> MarkupLine:
    return (strategy or DEFAULT_STRATEGY).classify(raw)


__all__ = [
    "DEFAULT_STRATEGY",
    "LineKind",
    "MarkupLine",
    "NotesMarkupStrategy",
    "classify_line",
    "default_markup_strategy",
]
