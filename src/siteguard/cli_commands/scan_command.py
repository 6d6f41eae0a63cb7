"""Scan CLI commands."""

from collections.abc import Sequence
from pathlib import Path

import typer
from rich.markup import escape

from siteguard.modules.scanner import Site, SiteReport

from .deps import cli_module
from .scan_helpers import apply_overrides, normalize_verbose
from .shared import app, configure_logging, console

TimeoutOption = typer.Option(None, "--timeout", "-t", help="Per-site fetch timeout in seconds")
ConcurrencyOption = typer.Option(
    None, "--concurrency", "-c", help="Number of sites evaluated at once"
)
RetriesOption = typer.Option(None, "--retries", help="Extra attempts after a transport error")
InsecureOption = typer.Option(False, "--insecure", help="Do not verify TLS certificates")
JsonOption = typer.Option(None, "--json", help="Also write a JSON report to this path")
DetailsOption = typer.Option(False, "--details", "-d", help="List the reason for every non-pass")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose scan output")


@app.command()
def scan(
    sites_file: Path | None = typer.Argument(
        None, help="JSON array of {name, url} objects (default: SITEGUARD_SITES_FILE)"
    ),
    timeout: float | None = TimeoutOption,
    concurrency: int | None = ConcurrencyOption,
    retries: int | None = RetriesOption,
    insecure: bool = InsecureOption,
    json_path: Path | None = JsonOption,
    details: bool = DetailsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Scan every site in a site list."""
    cli = cli_module()
    effective_verbose = normalize_verbose(verbose)
    configure_logging(effective_verbose)

    path = sites_file or _sites_file_from_config(cli)
    try:
        sites = cli.load_sites(path)
    except cli.SiteListError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    if not sites:
        console.print("[yellow]Site list is empty; nothing to scan.[/yellow]")
        return

    _run(cli, sites, timeout, concurrency, retries, insecure, json_path, details, effective_verbose)


@app.command()
def check(
    url: str = typer.Argument(..., help="URL of the site to check"),
    timeout: float | None = TimeoutOption,
    concurrency: int | None = ConcurrencyOption,
    retries: int | None = RetriesOption,
    insecure: bool = InsecureOption,
    json_path: Path | None = JsonOption,
    details: bool = DetailsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Check a single URL."""
    cli = cli_module()
    effective_verbose = normalize_verbose(verbose)
    configure_logging(effective_verbose)

    if "://" not in url:
        url = f"https://{url}"
    sites = [Site(name=url, url=url)]
    _run(cli, sites, timeout, concurrency, retries, insecure, json_path, details, effective_verbose)


def _sites_file_from_config(cli) -> Path:
    configured = cli.get_sites_file()
    if not configured:
        console.print(
            "[red]Error: No site list given. Pass a file or set SITEGUARD_SITES_FILE.[/red]"
        )
        raise typer.Exit(1)
    return Path(configured)


def _run(
    cli,
    sites: Sequence[Site],
    timeout: float | None,
    concurrency: int | None,
    retries: int | None,
    insecure: bool,
    json_path: Path | None,
    details: bool,
    verbose: bool,
) -> None:
    config = apply_overrides(cli.load_scan_config(), timeout, concurrency, retries, insecure)
    scanner = cli.SiteScanner(config)

    console.print(
        f"[blue]Scanning {len(sites)} site(s) "
        f"(concurrency {config.concurrency}, timeout {config.timeout:g}s)...[/blue]"
    )
    progress = (lambda msg: console.print(f"[dim]{msg}[/dim]")) if verbose else None
    try:
        reports: list[SiteReport] = cli.safe_async_run(scanner.scan(sites, progress=progress))
    except KeyboardInterrupt:
        console.print("[yellow]Scan cancelled.[/yellow]")
        raise typer.Exit(130) from None

    check_names = scanner.check_names
    console.print(cli.build_results_table(check_names, reports))

    if details:
        for name, lines in cli.build_details(check_names, reports):
            console.print(f"\n[bold]{escape(name)}[/bold]")
            for line in lines:
                console.print(f"  - {line}", markup=False)

    if json_path:
        written = cli.write_json_report(json_path, check_names, reports)
        console.print(f"[dim]JSON report written to {written}[/dim]")
