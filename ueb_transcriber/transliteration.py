"""Scanning engine: English text to Unicode Braille.

One left-to-right pass per call. The only mutable state is a
:class:`ScanState` created inside :func:`transliterate` and discarded on
return, so the engine is safe to call from any number of threads.

Each character is classified in this order:

1. newline / whitespace -> literal newline / space, leaves number mode
                            (whitespace is :data:`~ueb_transcriber.rules.WHITESPACE`)
2. ASCII digit           -> number indicator on entering a digit run, then the digit cell
3. punctuation           -> its one- or two-cell mapping
4. ASCII letter          -> capital indicator when uppercase, then (Grade 2)
                            word contraction, letter-group contraction, or the
                            single-letter cell
5. anything else         -> copied through unchanged
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List

from ueb_transcriber.contractions import (
    ContractionMatch,
    find_letter_contraction,
    find_word_contraction,
    is_ascii_letter,
)
from ueb_transcriber.rules import ALPHABET, DIGITS, INDICATORS, PUNCTUATION, WHITESPACE

logger = logging.getLogger(__name__)

PREVIEW_LEN = 60


def _preview(s: str, n: int = PREVIEW_LEN) -> str:
    """Return a safe preview slice for debug logs."""
    return repr(s[:n])


def is_ascii_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


@dataclass
class ScanState:
    """Cursor and number-mode flag for a single transliteration call."""

    text: str
    pos: int = 0
    in_number: bool = False
    out: List[str] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def char(self) -> str:
        return self.text[self.pos]

    def emit(self, braille: str, advance: int = 1) -> None:
        self.out.append(braille)
        self.pos += advance

    def result(self) -> str:
        return "".join(self.out)


def _contraction_at(text: str, pos: int) -> ContractionMatch | None:
    return find_word_contraction(text, pos) or find_letter_contraction(text, pos)


def _scan_letter(state: ScanState, grade2: bool) -> None:
    char = state.char
    if char.isupper():
        state.out.append(INDICATORS.capital)
    match = _contraction_at(state.text, state.pos) if grade2 else None
    if match is not None:
        state.emit(match.braille, match.length)
    else:
        state.emit(ALPHABET.get(char.lower(), char))


def _scan_char(state: ScanState, grade2: bool) -> None:
    char = state.char
    if char == "\n":
        state.in_number = False
        state.emit(INDICATORS.newline)
    elif char in WHITESPACE:
        state.in_number = False
        state.emit(INDICATORS.space)
    elif is_ascii_digit(char):
        if not state.in_number:
            state.out.append(INDICATORS.number)
            state.in_number = True
        state.emit(DIGITS.get(char, char))
    else:
        state.in_number = False
        if char in PUNCTUATION:
            state.emit(PUNCTUATION[char])
        elif is_ascii_letter(char):
            _scan_letter(state, grade2)
        else:
            state.emit(char)


def transliterate(text: Any, grade2: bool = True) -> str:
    """Return ``text`` in UEB Braille; Grade 1 when ``grade2`` is false.

    Non-string or empty input yields ``""``. Characters without a rule
    table entry are copied through unchanged.
    """

    if not text or not isinstance(text, str):
        return ""

    logger.debug(f"transliterate called with {len(text)} chars (grade2={grade2})")
    logger.debug(f"Input text preview: {_preview(text)}")
    state = ScanState(text)
    while not state.done:
        _scan_char(state, grade2)
    result = state.result()
    logger.debug(f"Output braille preview: {_preview(result)}")
    return result


def untranslated_characters(text: Any) -> List[str]:
    """Sorted distinct characters :func:`transliterate` would pass through."""

    if not text or not isinstance(text, str):
        return []
    return sorted(
        {
            char
            for char in text
            if not (
                char in WHITESPACE
                or is_ascii_digit(char)
                or char in PUNCTUATION
                or is_ascii_letter(char)
            )
        }
    )


__all__ = [
    "ScanState",
    "is_ascii_digit",
    "transliterate",
    "untranslated_characters",
]
