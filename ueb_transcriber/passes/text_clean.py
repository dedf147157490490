from __future__ import annotations

from ueb_transcriber.framework import Artifact, register
from ueb_transcriber.text_normalize import clean_text


class _TextCleanPass:
    name = "text_clean"

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        cleaned = clean_text(a.payload)
        return a.with_metrics(
            self.name,
            cleaned,
            normalized=True,
            changed=cleaned != a.payload,
        )


text_clean = register(_TextCleanPass())
