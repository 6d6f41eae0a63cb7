"""siteguard CLI - transport security checks for web sites.

This module is the public facade: command modules look symbols up here at call
time, so tests can monkeypatch them.
"""

from siteguard.config import SiteListError, get_sites_file, load_scan_config, load_sites
from siteguard.modules.report import build_details, build_results_table, write_json_report
from siteguard.modules.scanner import SiteScanner
from siteguard.utils.async_utils import safe_async_run

from .cli_commands import info_command, scan_command  # noqa: F401  (registers commands)
from .cli_commands.shared import app, console

__all__ = [
    "SiteListError",
    "SiteScanner",
    "app",
    "build_details",
    "build_results_table",
    "console",
    "get_sites_file",
    "load_scan_config",
    "load_sites",
    "main",
    "safe_async_run",
    "write_json_report",
]


def main() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    main()
