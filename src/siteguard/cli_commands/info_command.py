"""Informational CLI commands."""

from siteguard.modules.checks import CHECK_NAMES

from .shared import app, console


@app.command()
def checks() -> None:
    """List the checks in report column order."""
    for index, name in enumerate(CHECK_NAMES, start=1):
        console.print(f"{index}. {name}")


@app.command()
def version() -> None:
    """Show the installed siteguard version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("siteguard")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"siteguard {current_version}")
