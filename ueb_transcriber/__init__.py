"""English text and academic notes to Unicode UEB Braille."""

# Importing the package registers the pipeline passes.
from . import passes  # noqa: F401
from .document import format_document
from .transliteration import transliterate
from .validation import BrailleCharInfo, inspect_codepoint, is_valid_braille

__all__: list[str] = [
    "BrailleCharInfo",
    "format_document",
    "inspect_codepoint",
    "is_valid_braille",
    "transliterate",
]
