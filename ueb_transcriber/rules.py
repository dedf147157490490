"""Static UEB rule tables.

Every table is a read-only mapping built once at import time and shared by
all callers, so concurrent readers never need locking. Keys are lowercase;
case is signalled separately through :data:`INDICATORS.capital`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Mapping

BRAILLE_BASE: Final[int] = 0x2800
BRAILLE_LAST: Final[int] = 0x28FF


def cell(*dots: int) -> str:
    """Return the Braille cell with the given dot numbers (1-8) raised."""

    mask = sum(1 << (dot - 1) for dot in set(dots))
    return chr(BRAILLE_BASE + mask)


ALPHABET: Final[Mapping[str, str]] = MappingProxyType(
    {
        "a": "⠁", "b": "⠃", "c": "⠉", "d": "⠙", "e": "⠑", "f": "⠋",
        "g": "⠛", "h": "⠓", "i": "⠊", "j": "⠚", "k": "⠅", "l": "⠇",
        "m": "⠍", "n": "⠝", "o": "⠕", "p": "⠏", "q": "⠟", "r": "⠗",
        "s": "⠎", "t": "⠞", "u": "⠥", "v": "⠧", "w": "⠺", "x": "⠭",
        "y": "⠽", "z": "⠵",
    }
)

# Digits reuse the a-j cells; the number indicator disambiguates them.
DIGITS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "0": "⠚", "1": "⠁", "2": "⠃", "3": "⠉", "4": "⠙",
        "5": "⠑", "6": "⠋", "7": "⠛", "8": "⠓", "9": "⠊",
    }
)

# Whole-word contractions. Insertion order breaks equal-length ties.
WORD_CONTRACTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "and": "⠯", "for": "⠿", "of": "⠷", "the": "⠮", "with": "⠾",
        "you": "⠽", "as": "⠵", "but": "⠃", "can": "⠉", "do": "⠙",
        "every": "⠑", "from": "⠋", "go": "⠛", "have": "⠓", "just": "⠚",
        "knowledge": "⠅", "like": "⠇", "more": "⠍", "not": "⠝",
        "people": "⠏", "quite": "⠟", "rather": "⠗", "so": "⠎",
        "that": "⠞", "us": "⠥", "very": "⠧", "will": "⠺", "it": "⠭",
        "his": "⠓", "was": "⠺", "were": "⠺", "are": "⠜", "be": "⠆",
        "been": "⠆", "had": "⠓", "here": "⠓", "know": "⠅", "lord": "⠇",
        "may": "⠍", "name": "⠝", "one": "⠕", "part": "⠏",
        "question": "⠟", "right": "⠗", "some": "⠎", "time": "⠞",
        "under": "⠥", "work": "⠺", "young": "⠽",
    }
)

# Letter-group contractions, matched anywhere inside a word.
LETTER_CONTRACTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ch": "⠡", "gh": "⠣", "sh": "⠩", "th": "⠹", "wh": "⠱", "ed": "⠫",
        "er": "⠻", "ou": "⠳", "ow": "⠪", "st": "⠌", "ar": "⠜", "ing": "⠬",
    }
)

PUNCTUATION: Final[Mapping[str, str]] = MappingProxyType(
    {
        ".": "⠲", ",": "⠂", ";": "⠆", ":": "⠒", "!": "⠖", "?": "⠦",
        '"': "⠦", "'": "⠄", "(": "⠐⠣", ")": "⠐⠜", "[": "⠨⠣", "]": "⠨⠜",
        "{": "⠸⠣", "}": "⠸⠜", "-": "⠤", "–": "⠠⠤", "—": "⠐⠠⠤",
        "/": "⠸⠌", "\\": "⠸⠡", "*": "⠐⠔", "&": "⠈⠯", "@": "⠈⠁",
        "#": "⠼", "$": "⠈⠎", "%": "⠨⠴", "^": "⠘⠔", "~": "⠘⠱",
        "`": "⠘⠄", "|": "⠸⠳", "<": "⠈⠣", ">": "⠈⠜", "=": "⠐⠶",
        "+": "⠐⠖", "_": "⠸⠤",
    }
)


@dataclass(frozen=True)
class IndicatorSet:
    """Fixed indicator symbols shared by the engine and the formatter."""

    capital: str = cell(6)
    number: str = cell(3, 4, 5, 6)
    italic: str = cell(4, 6)
    bold: str = cell(4, 5, 6)
    underline: str = cell(4, 5)
    emphasis: str = cell(3, 4)
    space: str = " "
    newline: str = "\n"


INDICATORS: Final[IndicatorSet] = IndicatorSet()

# Structural glyphs used by the document formatter.
BULLET_GLYPH: Final[str] = "⠸⠲"
NUMBERED_SEPARATOR: Final[str] = "⠲"

# Characters treated as word spacing by the scanner and the validator: ASCII
# whitespace, the Unicode space separators, U+2028/U+2029 and U+FEFF.
# The C0 information separators (U+001C..U+001F) and U+0085 are not spacing.
WHITESPACE_CHARS: Final[str] = (
    "\t\n\x0b\x0c\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE: Final[frozenset[str]] = frozenset(WHITESPACE_CHARS)


class BrailleGrade(Enum):
    """Contraction level applied by the scanning engine."""

    GRADE1 = "Grade1"
    GRADE2 = "Grade2"

    @property
    def contracted(self) -> bool:
        return self is BrailleGrade.GRADE2

    @classmethod
    def parse(cls, value: Any) -> BrailleGrade:
        """Coerce config values such as ``"grade1"``, ``2`` or ``True``."""

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.GRADE2 if value else cls.GRADE1
        key = str(value).strip().lower().replace(" ", "")
        grade = _GRADE_ALIASES.get(key)
        if grade is None:
            raise ValueError(f"unknown braille grade: {value!r}")
        return grade


_GRADE_ALIASES: Final[Mapping[str, BrailleGrade]] = MappingProxyType(
    {
        alias: grade
        for grade, aliases in (
            (BrailleGrade.GRADE1, ("grade1", "g1", "1", "uncontracted")),
            (BrailleGrade.GRADE2, ("grade2", "g2", "2", "contracted")),
        )
        for alias in aliases
    }
)


__all__ = [
    "ALPHABET",
    "BRAILLE_BASE",
    "BRAILLE_LAST",
    "BULLET_GLYPH",
    "BrailleGrade",
    "DIGITS",
    "INDICATORS",
    "IndicatorSet",
    "LETTER_CONTRACTIONS",
    "NUMBERED_SEPARATOR",
    "PUNCTUATION",
    "WHITESPACE",
    "WHITESPACE_CHARS",
    "WORD_CONTRACTIONS",
    "cell",
]
