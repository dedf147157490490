"""Transliteration pass.

Converts a plain-text payload to Braille at the configured grade and
records which characters had no rule-table entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ueb_transcriber.env_utils import use_grade2
from ueb_transcriber.framework import Artifact, register
from ueb_transcriber.rules import BrailleGrade
from ueb_transcriber.transliteration import transliterate as _transliterate
from ueb_transcriber.transliteration import untranslated_characters


def _default_grade() -> BrailleGrade:
    return BrailleGrade.GRADE2 if use_grade2() else BrailleGrade.GRADE1


@dataclass
class _TransliteratePass:
    name: str = field(default="transliterate", init=False)
    grade: Any = field(default_factory=_default_grade)

    def __post_init__(self) -> None:
        self.grade = BrailleGrade.parse(self.grade)

    def __call__(self, a: Artifact) -> Artifact:
        text = a.payload
        if not isinstance(text, str):
            return a
        braille = _transliterate(text, grade2=self.grade.contracted)
        return a.with_metrics(
            self.name,
            braille,
            grade=self.grade.value,
            input_chars=len(text),
            output_cells=len(braille),
            untranslated=untranslated_characters(text),
        )


transliterate = register(_TransliteratePass())
