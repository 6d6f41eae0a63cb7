"""Scan orchestration across a list of sites."""

import asyncio
import logging
import time
from collections.abc import Callable, Sequence

import httpx

from siteguard.modules.evaluator import Evaluator, FetchedPage, FetchFailure, Unreachable
from siteguard.tools.http import HTMLDocument, HTTPClient

from .models import ScanConfig, Site, SiteReport

logger = logging.getLogger(__name__)


class SiteScanner:
    """Fetch and evaluate sites with bounded concurrency."""

    def __init__(
        self,
        config: ScanConfig | None = None,
        evaluator: Evaluator | None = None,
        client_factory: Callable[..., HTTPClient] = HTTPClient,
    ):
        self.config = config or ScanConfig()
        self.evaluator = evaluator or Evaluator()
        self.client_factory = client_factory

    @property
    def check_names(self) -> list[str]:
        return self.evaluator.check_names

    async def scan(
        self,
        sites: Sequence[Site],
        progress: Callable[[str], None] | None = None,
    ) -> list[SiteReport]:
        """Scan all sites and return reports in input order."""
        semaphore = asyncio.Semaphore(max(1, self.config.concurrency))

        async with self.client_factory(
            timeout=self.config.timeout,
            follow_redirects=self.config.follow_redirects,
            verify_ssl=self.config.verify_ssl,
            user_agent=self.config.user_agent,
        ) as client:

            async def run(site: Site) -> SiteReport:
                async with semaphore:
                    started = time.perf_counter()
                    report = await self.scan_site(client, site)
                if progress:
                    elapsed = time.perf_counter() - started
                    state = "done" if report.reachable else "unreachable"
                    progress(f"[{site.name}] {state} ({elapsed:.1f}s)")
                return report

            # gather keeps results aligned with the input order
            return list(await asyncio.gather(*(run(site) for site in sites)))

    async def scan_site(self, client: HTTPClient, site: Site) -> SiteReport:
        """Fetch and evaluate one site; failures never propagate."""
        try:
            page = await self.fetch(client, site)
            result = self.evaluator.evaluate(page)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("Evaluation of %s failed", site.url, exc_info=True)
            return SiteReport(site=site, result=Unreachable(reason=_describe(exc)))

        status_code = page.status_code if isinstance(page, FetchedPage) else None
        return SiteReport(site=site, result=result, status_code=status_code)

    async def fetch(self, client: HTTPClient, site: Site) -> FetchedPage | FetchFailure:
        """GET a site, retrying transient transport errors."""
        attempts = max(0, self.config.retries) + 1
        attempt = 0
        while True:
            attempt += 1
            try:
                response = await client.get(site.url)
                break
            except httpx.TransportError as exc:
                reason = _describe(exc)
                if attempt < attempts:
                    logger.debug(
                        "Fetch of %s failed (attempt %d/%d): %s", site.url, attempt, attempts, reason
                    )
                    continue
            except (httpx.RequestError, httpx.InvalidURL) as exc:
                reason = _describe(exc)
            logger.warning("Could not reach %s: %s", site.url, reason)
            return FetchFailure(url=site.url, reason=reason)

        # parsing large pages would otherwise stall the other fetches
        document = await asyncio.to_thread(HTMLDocument.parse, response.body)
        return FetchedPage(
            url=response.url,
            headers=response,
            document=document,
            status_code=response.status_code,
        )


def _describe(exc: Exception) -> str:
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


async def quick_scan(url: str, config: ScanConfig | None = None) -> SiteReport:
    """Scan a single URL."""
    scanner = SiteScanner(config)
    reports = await scanner.scan([Site(name=url, url=url)])
    return reports[0]
