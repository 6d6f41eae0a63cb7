"""Helpers for scan-related CLI commands."""

from siteguard.config import get_verbose
from siteguard.modules.scanner import ScanConfig


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and configuration."""
    effective = verbose if isinstance(verbose, bool) else False
    return effective or get_verbose()


def coerce_positive_int(value: int | None, default: int) -> int:
    """Return value when positive int-like, otherwise fallback default."""
    return max(1, int(value)) if isinstance(value, int) else default


def coerce_nonnegative_int(value: int | None, default: int) -> int:
    """Return non-negative integer with fallback default."""
    return max(0, int(value)) if isinstance(value, int) else default


def coerce_positive_float(value: float | None, default: float) -> float:
    """Return value when positive float-like, otherwise fallback default."""
    if isinstance(value, (int, float)):
        return max(0.1, float(value))
    return default


def apply_overrides(
    config: ScanConfig,
    timeout: float | None = None,
    concurrency: int | None = None,
    retries: int | None = None,
    insecure: bool = False,
) -> ScanConfig:
    """Layer CLI options over a configuration loaded from env/config file."""
    config.timeout = coerce_positive_float(timeout, config.timeout)
    config.concurrency = coerce_positive_int(concurrency, config.concurrency)
    config.retries = coerce_nonnegative_int(retries, config.retries)
    if insecure:
        config.verify_ssl = False
    return config
