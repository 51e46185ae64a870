from __future__ import annotations

import nox


@nox.session(python=["3.10", "3.11", "3.12"])
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "-q", *session.posargs)


@nox.session(python="3.12")
def error_codes(session: nox.Session) -> None:
    session.install("-e", ".")
    session.run("python", "scripts/check_error_codes.py")
