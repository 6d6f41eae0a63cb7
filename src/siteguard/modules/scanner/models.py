"""Data models for sites, scan configuration and per-site reports."""

from dataclasses import dataclass

from siteguard.modules.evaluator import EvaluationResult, Unreachable
from siteguard.tools.http import DEFAULT_USER_AGENT


@dataclass(frozen=True)
class Site:
    """A scan target."""

    name: str
    url: str


@dataclass
class ScanConfig:
    """Configuration for a scan run."""

    timeout: float = 30.0
    concurrency: int = 4
    retries: int = 0
    follow_redirects: bool = True
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class SiteReport:
    """Evaluation outcome for one site."""

    site: Site
    result: EvaluationResult | Unreachable
    status_code: int | None = None

    @property
    def reachable(self) -> bool:
        return not isinstance(self.result, Unreachable)
