from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass, replace
from functools import reduce
from typing import Any

from ueb_transcriber.config import PipelineSpec, warn_unknown_options
from ueb_transcriber.framework import Artifact, Pass, registry

_CONVERTING_STEPS = ("transliterate", "format_notes")


def _pass_steps(spec: PipelineSpec) -> list[str]:
    """Return pipeline steps; error on ones that are not registered."""
    regs = registry()
    unknown = [s for s in spec.pipeline if s not in regs]
    if unknown:
        raise KeyError(f"unknown steps: {unknown}")
    return list(spec.pipeline)


def _index_of(steps: Sequence[str], name: str) -> int | None:
    return next((i for i, s in enumerate(steps) if s == name), None)


def _ensure_clean_precedes_conversion(steps: Sequence[str]) -> None:
    """Raise if ``text_clean`` runs after the text was already converted."""
    clean_index = _index_of(steps, "text_clean")
    if clean_index is None:
        return
    first_conversion = next(
        ((s, i) for i, s in enumerate(steps) if s in _CONVERTING_STEPS),
        None,
    )
    if first_conversion and first_conversion[1] < clean_index:
        raise ValueError(f"text_clean must run before {first_conversion[0]}")


def _ensure_format_precedes_transliterate(steps: Sequence[str]) -> None:
    """Markup is gone once text is transliterated, so formatting must come first."""
    fmt = _index_of(steps, "format_notes")
    trans = _index_of(steps, "transliterate")
    if fmt is not None and trans is not None and fmt > trans:
        raise ValueError("format_notes must run before transliterate")


def _enforce_invariants(spec: PipelineSpec) -> list[str]:
    """Return validated steps while enforcing ordering invariants."""
    steps = _pass_steps(spec)
    _ensure_clean_precedes_conversion(steps)
    _ensure_format_precedes_transliterate(steps)
    return steps


def _prepare_pass(pass_obj: Pass, overrides: Mapping[str, Any]) -> tuple[Pass, Mapping[str, Any]]:
    """Return a configured pass and sanitized overrides for meta propagation."""
    opts = dict(overrides)
    if not opts or not is_dataclass(pass_obj):
        return pass_obj, opts

    names = {f.name for f in fields(pass_obj) if f.init}
    updates = {k: opts[k] for k in opts if k in names}
    if not updates:
        return pass_obj, opts
    # replace() re-runs __post_init__, which normalizes option values
    return replace(pass_obj, **updates), opts


def configure_pass(pass_obj: Pass, opts: Mapping[str, Any]) -> Pass:
    """Return a new pass with ``opts`` merged without mutating ``pass_obj``."""

    configured, _ = _prepare_pass(pass_obj, opts)
    return configured


def _time_step(
    acc: tuple[Artifact, dict[str, float]],
    p: Pass,
) -> tuple[Artifact, dict[str, float]]:
    """Apply ``p`` to ``acc`` while recording its execution time."""
    a, timings = acc
    t0 = time.perf_counter()
    a = p(a)
    return a, {**timings, p.name: time.perf_counter() - t0}


def _with_pass_options(
    meta: Mapping[str, Any] | None, name: str, overrides: Mapping[str, Any]
) -> dict[str, Any]:
    """Return ``meta`` with ``overrides`` recorded under ``options[name]``."""

    base = {**(meta or {})}
    existing = dict((meta or {}).get("options") or {})
    if overrides:
        existing[name] = dict(overrides)
    if existing:
        base["options"] = existing
    else:
        base.pop("options", None)
    return base


def _run_passes(
    spec: PipelineSpec, steps: Sequence[str], a: Artifact
) -> tuple[Artifact, dict[str, float]]:
    """Run ``steps`` capturing per-pass timings."""
    configs = [_prepare_pass(registry()[name], spec.options.get(name, {})) for name in steps]

    def _apply(
        acc: tuple[Artifact, dict[str, float]],
        config: tuple[Pass, Mapping[str, Any]],
    ) -> tuple[Artifact, dict[str, float]]:
        artifact, timings = acc
        p, overrides = config
        seeded = Artifact(
            payload=artifact.payload,
            meta=_with_pass_options(artifact.meta, p.name, overrides),
        )
        return _time_step((seeded, timings), p)

    return reduce(_apply, configs, (a, {}))


def input_artifact(text: str, source: str | None = None) -> Artifact:
    meta: dict[str, Any] = {"metrics": {}}
    if source:
        meta["input"] = source
    return Artifact(payload=text, meta=meta)


def run_convert(
    text: str,
    spec: PipelineSpec,
    *,
    notes: bool = False,
    source: str | None = None,
) -> tuple[Artifact, dict[str, float]]:
    """Run the configured pipeline over ``text``.

    An empty pipeline falls back to the plain-text or notes default, and
    options naming steps outside that default are warned about.
    Returns the final artifact and per-pass timings in seconds.
    """
    if not spec.pipeline:
        spec = spec.with_default_pipeline(notes)
        warn_unknown_options(spec.pipeline, spec.options)
    steps = _enforce_invariants(spec)
    return _run_passes(spec, steps, input_artifact(text, source))


def build_report(artifact: Artifact, timings: Mapping[str, float]) -> dict[str, Any]:
    """Summarize a run: metrics, options, grade, and processing time."""
    meta = artifact.meta or {}
    metrics = dict(meta.get("metrics") or {})
    grade = next(
        (m["grade"] for m in metrics.values() if isinstance(m, dict) and m.get("grade")),
        None,
    )
    report: dict[str, Any] = {
        "pipeline": list(timings),
        "metrics": metrics,
        "timings": {name: round(seconds, 6) for name, seconds in timings.items()},
        "processing_time_ms": round(sum(timings.values()) * 1000, 3),
    }
    if grade:
        report["braille_grade"] = grade
    if meta.get("options"):
        report["options"] = dict(meta["options"])
    if meta.get("input"):
        report["input"] = meta["input"]
    return report


__all__ = [
    "build_report",
    "configure_pass",
    "input_artifact",
    "run_convert",
]
