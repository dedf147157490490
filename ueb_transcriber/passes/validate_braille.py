from __future__ import annotations

from ueb_transcriber.framework import Artifact, register
from ueb_transcriber.validation import is_valid_braille


class _ValidateBraillePass:
    """Record whether the payload is pure Braille; never alters it."""

    name = "validate_braille"

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        return a.with_metrics(self.name, a.payload, valid=is_valid_braille(a.payload))


validate_braille = register(_ValidateBraillePass())
