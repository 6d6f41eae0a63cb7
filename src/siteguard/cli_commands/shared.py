"""Shared CLI app objects."""

import logging

import typer
from rich.console import Console

app = typer.Typer(
    name="siteguard",
    help="Check web sites against transport security best practices",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
