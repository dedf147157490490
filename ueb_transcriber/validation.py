"""Braille output checks and per-cell inspection."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from ueb_transcriber.rules import BRAILLE_BASE, BRAILLE_LAST, WHITESPACE_CHARS

_BRAILLE_ONLY = re.compile(r"[\u2800-\u28FF" + re.escape(WHITESPACE_CHARS) + "]*")


def is_valid_braille(text: Any) -> bool:
    """Return ``True`` if ``text`` holds only Braille cells and whitespace."""

    if not text or not isinstance(text, str):
        return False
    return _BRAILLE_ONLY.fullmatch(text) is not None


@dataclass(frozen=True)
class BrailleCharInfo:
    char: str
    unicode_label: str
    dot_mask: int
    binary_mask: str

    @property
    def raised_dots(self) -> Tuple[int, ...]:
        """Dot numbers (1-8) raised in this cell."""
        return tuple(i + 1 for i in range(8) if self.dot_mask & (1 << i))

    def as_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "raised_dots": list(self.raised_dots)}


def inspect_codepoint(char: Any) -> BrailleCharInfo | None:
    """Decompose a single Braille character into its dot mask.

    Returns ``None`` for anything that is not exactly one character in
    U+2800..U+28FF.
    """

    if not isinstance(char, str) or len(char) != 1:
        return None
    code_point = ord(char)
    if not BRAILLE_BASE <= code_point <= BRAILLE_LAST:
        return None
    dots = code_point - BRAILLE_BASE
    return BrailleCharInfo(
        char=char,
        unicode_label=f"U+{code_point:04X}",
        dot_mask=dots,
        binary_mask=f"{dots:08b}",
    )


__all__ = ["BrailleCharInfo", "inspect_codepoint", "is_valid_braille"]
