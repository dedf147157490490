"""Document formatter: lightweight-markup notes to a structured Braille document.

Lines are handled independently:

* blank            -> a newline
* ``# Title``      -> capital indicator + uppercased title, then a blank line
* ``## Heading``   -> bold indicator + heading, then a blank line
* ``* item``/``- item`` -> bullet glyph, space, item, newline
* ``12. item``     -> number indicator, number, separator, space, item, newline
* anything else    -> ``**bold**`` and ``*italic*`` spans rendered, then the
  rest of the line, newline

Inline bold/italic markup is only rendered on plain lines unless
``inline_styles_everywhere`` is set.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, Tuple

from ueb_transcriber.inline_styles import render_inline_styles
from ueb_transcriber.rules import BULLET_GLYPH, INDICATORS, NUMBERED_SEPARATOR
from ueb_transcriber.strategies.markup import (
    LineKind,
    MarkupLine,
    NotesMarkupStrategy,
    default_markup_strategy,
)
from ueb_transcriber.transliteration import _preview, transliterate

logger = logging.getLogger(__name__)


def _styled(text: str, counts: Counter[str]) -> str:
    rendered, styles = render_inline_styles(text, transliterate)
    counts.update(styles)
    return transliterate(rendered)


def _render_line(
    line: MarkupLine, inline_everywhere: bool, counts: Counter[str]
) -> str:
    counts[line.kind.value] += 1
    if line.kind is LineKind.BLANK:
        return INDICATORS.newline

    def body(text: str) -> str:
        return _styled(text, counts) if inline_everywhere else transliterate(text)

    if line.kind is LineKind.TITLE:
        return f"{INDICATORS.capital}{body(line.body.upper())}\n\n"
    if line.kind is LineKind.HEADING:
        return f"{INDICATORS.bold}{body(line.body)}\n\n"
    if line.kind is LineKind.BULLET:
        return f"{BULLET_GLYPH} {body(line.body)}\n"
    if line.kind is LineKind.NUMBERED:
        number = transliterate(line.number or "")
        return (
            f"{INDICATORS.number}{number}{NUMBERED_SEPARATOR} {body(line.body)}\n"
        )
    return f"{_styled(line.body, counts)}\n"


def format_document_with_stats(
    notes: Any,
    *,
    inline_styles_everywhere: bool = False,
    strategy: NotesMarkupStrategy | None = None,
) -> Tuple[str, Dict[str, int]]:
    """Return the Braille document and per-kind line and span counts."""

    if not notes or not isinstance(notes, str):
        return "", {}

    markup = strategy or default_markup_strategy()
    counts: Counter[str] = Counter()
    logger.debug(f"format_document called with {len(notes)} chars")
    rendered = "".join(
        _render_line(markup.classify(raw), inline_styles_everywhere, counts)
        for raw in notes.split("\n")
    )
    result = rendered.strip()
    logger.debug(f"Line counts: {dict(counts)}")
    logger.debug(f"Output braille preview: {_preview(result)}")
    return result, dict(counts)


def format_document(
    notes: Any,
    *,
    inline_styles_everywhere: bool = False,
    strategy: NotesMarkupStrategy | None = None,
) -> str:
    """Convert markup-style academic notes into a formatted Braille document.

    Non-string or empty input yields ``""``; the result is stripped of
    leading and trailing whitespace.
    """

    text, _ = format_document_with_stats(
        notes,
        inline_styles_everywhere=inline_styles_everywhere,
        strategy=strategy,
    )
    return text


__all__ = ["format_document", "format_document_with_stats"]
