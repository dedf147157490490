"""Nox automation sessions for ueb_transcriber."""

from __future__ import annotations

import nox

nox.options.sessions = ("lint", "typecheck", "tests")
nox.options.reuse_existing_virtualenvs = True


@nox.session()
def lint(session: nox.Session) -> None:
    session.install("black", "flake8")
    session.run(
        "black",
        "--check",
        "--extend-exclude",
        "ueb_transcriber/rules.py",
        "ueb_transcriber",
        "tests",
    )
    session.run("flake8", "ueb_transcriber", "tests")


@nox.session()
def typecheck(session: nox.Session) -> None:
    session.install("mypy", "types-PyYAML")
    session.install("-e", ".")
    session.run("mypy", "ueb_transcriber")


@nox.session()
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "tests")
