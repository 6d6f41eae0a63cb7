"""Scanner module for siteguard - fetch and evaluate a list of sites."""

from .main import SiteScanner, quick_scan
from .models import ScanConfig, Site, SiteReport

__all__ = [
    "ScanConfig",
    "Site",
    "SiteReport",
    "SiteScanner",
    "quick_scan",
]
