"""Notes formatting pass.

Turns a markup-style notes payload into a structured Braille document and
counts the line kinds it recognized.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ueb_transcriber.document import format_document_with_stats
from ueb_transcriber.env_utils import inline_styles_everywhere as _inline_default
from ueb_transcriber.env_utils import parse_flag
from ueb_transcriber.framework import Artifact, register
from ueb_transcriber.rules import BrailleGrade


@dataclass
class _FormatNotesPass:
    name: str = field(default="format_notes", init=False)
    inline_styles_everywhere: Any = field(default_factory=_inline_default)

    def __post_init__(self) -> None:
        self.inline_styles_everywhere = parse_flag(self.inline_styles_everywhere)

    def __call__(self, a: Artifact) -> Artifact:
        notes = a.payload
        if not isinstance(notes, str):
            return a
        document, counts = format_document_with_stats(
            notes, inline_styles_everywhere=self.inline_styles_everywhere
        )
        return a.with_metrics(
            self.name, document, grade=BrailleGrade.GRADE2.value, **counts
        )


format_notes = register(_FormatNotesPass())
