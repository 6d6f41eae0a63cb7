"""Configuration getter functions."""

import logging
import os
from typing import Any

from siteguard.modules.scanner import ScanConfig
from siteguard.tools.http import DEFAULT_USER_AGENT

from .env_loader import load_global_config

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global config file
    3. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    global_config = load_global_config()
    if key in global_config and global_config[key] is not None:
        return global_config[key]

    return default


def _as_float(key: str, default: float) -> float:
    value = get_config(key, default)
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r; using %s", key, value, default)
        return default
    return number if number > 0 else default


def _as_int(key: str, default: int, minimum: int) -> int:
    value = get_config(key, default)
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid %s=%r; using %s", key, value, default)
        return default
    return number if number >= minimum else default


def _as_bool(key: str, default: bool) -> bool:
    value = get_config(key, default)
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    return default


def get_timeout() -> float:
    """Per-site fetch timeout in seconds (default: 30)."""
    return _as_float("SITEGUARD_TIMEOUT", 30.0)


def get_concurrency() -> int:
    """Number of sites evaluated at once (default: 4)."""
    return _as_int("SITEGUARD_CONCURRENCY", 4, minimum=1)


def get_retries() -> int:
    """Extra attempts after a transport error (default: 0)."""
    return _as_int("SITEGUARD_RETRIES", 0, minimum=0)


def get_user_agent() -> str:
    return str(get_config("SITEGUARD_USER_AGENT", DEFAULT_USER_AGENT))


def get_verify_ssl() -> bool:
    return _as_bool("SITEGUARD_VERIFY_SSL", True)


def get_verbose() -> bool:
    return _as_bool("SITEGUARD_VERBOSE", False)


def get_sites_file() -> str | None:
    value = get_config("SITEGUARD_SITES_FILE")
    return str(value) if value else None


def load_scan_config() -> ScanConfig:
    """Build a ScanConfig from environment, global config and defaults."""
    return ScanConfig(
        timeout=get_timeout(),
        concurrency=get_concurrency(),
        retries=get_retries(),
        verify_ssl=get_verify_ssl(),
        user_agent=get_user_agent(),
    )
