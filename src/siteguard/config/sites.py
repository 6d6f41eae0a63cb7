"""Site list loading."""

import json
from pathlib import Path
from typing import Any

import yaml

from siteguard.modules.scanner import Site


class SiteListError(ValueError):
    """Raised when a site list cannot be loaded."""


def load_sites(path: Path) -> list[Site]:
    """Load sites from a JSON array of {name, url} objects.

    Files ending in .yml or .yaml are read as YAML lists of the same shape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SiteListError(f"Cannot read site list {path}: {exc}") from exc

    try:
        if path.suffix.lower() in (".yml", ".yaml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SiteListError(f"Malformed site list {path}: {exc}") from exc

    return parse_sites(data)


def parse_sites(data: Any) -> list[Site]:
    """Validate decoded site list data."""
    if not isinstance(data, list):
        raise SiteListError("Site list must be an array of {name, url} objects")

    sites = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise SiteListError(f"Site #{index + 1} is not an object")
        url = str(entry.get("url") or "").strip()
        if not url:
            raise SiteListError(f"Site #{index + 1} has no url")
        name = str(entry.get("name") or "").strip() or url
        sites.append(Site(name=name, url=url))
    return sites
