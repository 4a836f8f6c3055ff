import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the ledger test suite against an editable install."""
    session.install("-e", ".[test]")
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def ledger_rules(session: nox.Session) -> None:
    """Aggregate, event and access-policy tests only; no API or projections."""
    session.install("-e", ".[test]")
    session.run("pytest", "-m", "domain", "tests/tracking/domain/")
