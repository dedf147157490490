"""Source text clean-up applied before transliteration.

Generated or pasted notes often carry mojibake, curly quotes, CRLF line
endings and exotic spaces. None of those have rule-table entries, so they
would be copied through into the Braille output untranslated. The helpers
here map them onto characters the engine knows.

Functions are pure except for debug logging.
"""

from __future__ import annotations

import logging
import re
from functools import reduce
from typing import Callable, Sequence

import ftfy

from ueb_transcriber.transliteration import _preview

logger = logging.getLogger(__name__)

_SPACE_TRANSLATION = {
    ord("\u00a0"): " ",  # non-breaking space
    ord("\u2000"): " ",  # en quad
    ord("\u2001"): " ",  # em quad
    ord("\u2002"): " ",  # en space
    ord("\u2003"): " ",  # em space
    ord("\u2004"): " ",  # three-per-em space
    ord("\u2005"): " ",  # four-per-em space
    ord("\u2006"): " ",  # six-per-em space
    ord("\u2007"): " ",  # figure space
    ord("\u2008"): " ",  # punctuation space
    ord("\u2009"): " ",  # thin space
    ord("\u200a"): " ",  # hair space
    ord("\u202f"): " ",  # narrow no-break space
    ord("\ufeff"): "",  # zero-width no-break space
    ord("\u200b"): "",  # zero-width space
    ord("\u200c"): "",  # zero-width non-joiner
    ord("\u200d"): "",  # zero-width joiner
    ord("\u2060"): "",  # word joiner
}

_CRLF_RE = re.compile(r"\r\n?")


def fix_encoding(text: str) -> str:
    """Repair mojibake and straighten curly quotes.

    HTML entities such as ``&lt;`` are literal source text and are left as is.
    """
    return ftfy.fix_text(text, unescape_html=False)


def normalize_newlines(text: str) -> str:
    return _CRLF_RE.sub("\n", text)


def normalize_spaces(text: str) -> str:
    """Map NBSP-like characters to plain spaces and drop zero-width ones."""
    return text.translate(_SPACE_TRANSLATION)


DEFAULT_STEPS: Sequence[Callable[[str], str]] = (
    normalize_newlines,
    fix_encoding,
    normalize_spaces,
)


def clean_text(text: str, steps: Sequence[Callable[[str], str]] = DEFAULT_STEPS) -> str:
    """Run ``text`` through each clean-up step in order."""
    if not text:
        return ""
    logger.debug(f"clean_text called with {len(text)} chars")
    result = reduce(lambda acc, step: step(acc), steps, text)
    logger.debug(f"After clean_text: {_preview(result)}")
    return result


__all__ = [
    "clean_text",
    "fix_encoding",
    "normalize_newlines",
    "normalize_spaces",
]
