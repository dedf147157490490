from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any

import typer

from ueb_transcriber.config import load_spec
from ueb_transcriber.core import build_report, run_convert
from ueb_transcriber.validation import inspect_codepoint, is_valid_braille

STDIN_MARKER = "-"


def _spec_path_candidates(path: str | Path) -> Iterator[Path]:
    """Yield potential spec locations without hitting the filesystem."""
    candidate = Path(path)
    pkg_dir = Path(__file__).resolve().parent
    yield from (
        candidate,
        pkg_dir.parent / candidate,
        pkg_dir / candidate,
    )


def _resolve_spec_path(path: str | Path) -> Path:
    """Pick the first existing pipeline spec from candidate locations."""
    return next((p for p in _spec_path_candidates(path) if p.exists()), Path(path))


def _format_timings(timings: Mapping[str, float]) -> str:
    """Return ``timings`` as newline-delimited ``name: seconds`` strings."""
    return "\n".join(f"{n}: {t:.4f}s" for n, t in timings.items())


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:
        _exit_with_error(exc)


def _read_source(source: str) -> str:
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, out: Path | None) -> None:
    rendered = text if text.endswith("\n") else text + "\n"
    if out is None:
        sys.stdout.write(rendered)
    else:
        out.write_text(rendered, encoding="utf-8")


def _cli_overrides(
    grade1: bool,
    inline_styles_everywhere: bool,
) -> dict[str, dict[str, Any]]:
    transliterate_opts: dict[str, Any] = {"grade": "grade1"} if grade1 else {}
    notes_opts: dict[str, Any] = (
        {"inline_styles_everywhere": True} if inline_styles_everywhere else {}
    )
    return {
        k: v
        for k, v in {
            "transliterate": transliterate_opts,
            "format_notes": notes_opts,
        }.items()
        if v
    }


def _run_convert(
    source: str,
    out: Path | None,
    notes: bool,
    grade1: bool,
    inline_styles_everywhere: bool,
    spec: str,
    verbose: bool,
    report: Path | None,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    s = load_spec(
        _resolve_spec_path(spec),
        overrides=_cli_overrides(grade1, inline_styles_everywhere),
    )
    text = _read_source(source)
    artifact, timings = run_convert(
        text,
        s,
        notes=notes,
        source=None if source == STDIN_MARKER else str(Path(source).resolve()),
    )
    _write_output(artifact.payload, out)
    if verbose:
        print(_format_timings(timings), file=sys.stderr)
    if report is not None:
        report.write_text(
            json.dumps(build_report(artifact, timings), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def convert(
    source: str = typer.Argument(..., help="Text file to convert, or '-' for stdin."),
    out: Path | None = typer.Option(None, "--out"),
    notes: bool = typer.Option(False, "--notes/--text"),
    grade1: bool = typer.Option(False, "--grade1"),
    inline_styles_everywhere: bool = typer.Option(False, "--inline-styles-everywhere"),
    spec: str = typer.Option("pipeline.yaml", "--spec"),
    verbose: bool = typer.Option(False, "--verbose"),
    report: Path | None = typer.Option(None, "--report"),
) -> None:
    """Convert English text or markup notes to Unicode Braille."""
    if notes and grade1:
        # the notes formatter always contracts
        raise typer.BadParameter("--grade1 cannot be combined with --notes")
    _safe(
        lambda: _run_convert(
            source,
            out,
            notes,
            grade1,
            inline_styles_everywhere,
            spec,
            verbose,
            report,
        )
    )


@app.command()
def inspect(char: str = typer.Argument(...)) -> None:
    """Show the Unicode label and dot mask of one Braille character."""
    info = inspect_codepoint(char)
    if info is None:
        print(f"error: not a single Braille character: {char!r}", file=sys.stderr)
        raise typer.Exit(1)
    print(json.dumps(info.as_dict(), indent=2, ensure_ascii=False))


@app.command()
def validate(source: str = typer.Argument(..., help="File to check, or '-' for stdin.")) -> None:
    """Exit non-zero unless the input holds only Braille cells and whitespace."""
    text = ""

    def _load() -> None:
        nonlocal text
        text = _read_source(source)

    _safe(_load)
    valid = is_valid_braille(text)
    print("valid" if valid else "invalid")
    if not valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
