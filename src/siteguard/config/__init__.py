"""
Configuration management for siteguard.

Supports multiple configuration sources in order of priority:
1. Command line options (applied by the CLI)
2. Environment variables
3. Global config file (~/.siteguard/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import get_global_config_path, load_global_config
from .getters import (
    get_concurrency,
    get_config,
    get_retries,
    get_sites_file,
    get_timeout,
    get_user_agent,
    get_verbose,
    get_verify_ssl,
    load_scan_config,
)
from .sites import SiteListError, load_sites, parse_sites

__all__ = [
    # env_loader
    "get_global_config_path",
    "load_global_config",
    # getters
    "get_concurrency",
    "get_config",
    "get_retries",
    "get_sites_file",
    "get_timeout",
    "get_user_agent",
    "get_verbose",
    "get_verify_ssl",
    "load_scan_config",
    # sites
    "SiteListError",
    "load_sites",
    "parse_sites",
]
