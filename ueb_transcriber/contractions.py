"""Longest-match contraction search packaged as reusable matchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, NamedTuple, Tuple

from ueb_transcriber.rules import LETTER_CONTRACTIONS, WORD_CONTRACTIONS

BoundaryPredicate = Callable[[str, int, int], bool]


class ContractionMatch(NamedTuple):
    """Braille replacement and the number of source characters it consumes."""

    braille: str
    length: int


def is_ascii_letter(char: str) -> bool:
    return len(char) == 1 and char.isascii() and char.isalpha()


def word_boundary(text: str, start: int, end: int) -> bool:
    """Return ``True`` when ``text[start:end]`` is a whole ASCII-letter run."""

    before_ok = start == 0 or not is_ascii_letter(text[start - 1])
    after_ok = end >= len(text) or not is_ascii_letter(text[end])
    return before_ok and after_ok


def no_boundary(text: str, start: int, end: int) -> bool:
    return True


@dataclass(frozen=True)
class ContractionMatcher:
    """Match a contraction table at a cursor, longest key first.

    Keys are ordered once by descending length with a stable sort, so keys
    of equal length keep the order of ``table``.
    """

    table: Mapping[str, str]
    boundary: BoundaryPredicate = no_boundary
    candidates: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "candidates",
            tuple(sorted(self.table, key=len, reverse=True)),
        )

    def match(self, text: str, pos: int) -> ContractionMatch | None:
        """Return the first candidate found at ``pos`` or ``None``."""

        return next(
            (
                ContractionMatch(self.table[key], len(key))
                for key in self.candidates
                if self._matches_at(key, text, pos)
            ),
            None,
        )

    def _matches_at(self, key: str, text: str, pos: int) -> bool:
        end = pos + len(key)
        return (
            end <= len(text)
            and text[pos:end].lower() == key
            and self.boundary(text, pos, end)
        )


WORD_MATCHER = ContractionMatcher(WORD_CONTRACTIONS, boundary=word_boundary)
LETTER_MATCHER = ContractionMatcher(LETTER_CONTRACTIONS)


def find_word_contraction(text: str, pos: int) -> ContractionMatch | None:
    """Whole-word contraction starting at ``pos``, bounded by non-letters."""

    if pos > 0 and is_ascii_letter(text[pos - 1]):
        return None
    return WORD_MATCHER.match(text, pos)


def find_letter_contraction(text: str, pos: int) -> ContractionMatch | None:
    """Letter-group contraction at ``pos`` regardless of surrounding letters."""

    return LETTER_MATCHER.match(text, pos)


__all__ = [
    "BoundaryPredicate",
    "ContractionMatch",
    "ContractionMatcher",
    "LETTER_MATCHER",
    "WORD_MATCHER",
    "find_letter_contraction",
    "find_word_contraction",
    "is_ascii_letter",
    "no_boundary",
    "word_boundary",
]
