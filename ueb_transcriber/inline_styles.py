from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, Pattern, Sequence, Tuple

from ueb_transcriber.rules import INDICATORS

Transliterate = Callable[[str], str]


@dataclass(frozen=True)
class InlineStyle:
    """A delimiter-wrapped span rendered between two copies of ``indicator``."""

    style: str
    pattern: Pattern[str]
    indicator: str

    def render(self, text: str, convert: Transliterate) -> Tuple[str, int]:
        """Replace every span in ``text``; return the result and span count."""

        return self.pattern.subn(
            lambda m: f"{self.indicator}{convert(m.group(1))}{self.indicator}",
            text,
        )


# Bold runs first so its double asterisks are consumed before italics.
INLINE_STYLES: Tuple[InlineStyle, ...] = (
    InlineStyle("bold", re.compile(r"\*\*(.*?)\*\*"), INDICATORS.bold),
    InlineStyle("italic", re.compile(r"\*(.*?)\*"), INDICATORS.italic),
)


def render_inline_styles(
    text: str,
    convert: Transliterate,
    styles: Sequence[InlineStyle] = INLINE_STYLES,
) -> Tuple[str, Dict[str, int]]:
    """Render ``**bold**`` and ``*italic*`` spans of ``text`` as Braille.

    Span contents go through ``convert``; text outside spans is returned
    as-is for the caller to transliterate.
    """

    counts: Counter[str] = Counter()
    for style in styles:
        text, n = style.render(text, convert)
        counts[style.style] += n
    return text, dict(counts)


__all__ = [
    "INLINE_STYLES",
    "InlineStyle",
    "Transliterate",
    "render_inline_styles",
]
