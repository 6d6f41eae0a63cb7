"""Configuration file loading."""

from pathlib import Path
from typing import Any

import yaml


def get_global_config_path() -> Path:
    """Return the path of the global ~/.siteguard/config.yml file."""
    return Path.home() / ".siteguard" / "config.yml"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.siteguard/config.yml."""
    config_path = get_global_config_path()
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return data if isinstance(data, dict) else {}
    return {}
