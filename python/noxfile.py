import nox

nox.options.sessions = ["lint", "format", "type_hints", "unit_tests", "smoke_tests"]


@nox.session(reuse_venv=True, python="3.9")
def lint(session: nox.Session) -> None:
    """
    Lint the StarChart sources and tests with ruff.

    Args:
        session (nox.Session): The Nox session being run.
    """
    session.install("ruff==0.4.8")
    session.run("ruff", "check", "--fix")


@nox.session(reuse_venv=True, python="3.9")
def format(session: nox.Session) -> None:
    """
    Format the codebase with ruff.

    Args:
        session (nox.Session): The Nox session being run.
    """
    session.install("ruff==0.4.8")
    session.run("ruff", "format")


@nox.session(reuse_venv=True, python="3.9")
def type_hints(session: nox.Session) -> None:
    """
    Check type hints with mypy.

    Args:
        session (nox.Session): The Nox session being run.
    """
    session.install("-r", "requirements.txt")
    session.install("-r", "requirements_dev.txt")
    session.run("mypy", "--install-types", "--non-interactive", "StarChart")


@nox.session(reuse_venv=True, python="3.9")
def unit_tests(session: nox.Session) -> None:
    """
    Run the unit tests: projection, sampling, sizing, ticks
    and label placement in isolation.

    Args:
        session (nox.Session): The Nox session being run.
    """
    session.install("-r", "requirements.txt")
    session.install("-r", "requirements_dev.txt")
    session.run("pytest", "-m", "unit")


@nox.session(reuse_venv=True, python="3.9")
def smoke_tests(session: nox.Session) -> None:
    """
    Render whole charts end to end, including the raster sink.

    Args:
        session (nox.Session): The Nox session being run.
    """
    session.install("-r", "requirements.txt")
    session.install("-r", "requirements_dev.txt")
    session.run("pytest", "-m", "smoke")
