"""Async HTTP client used to fetch scanned sites."""

from dataclasses import dataclass

import httpx

DEFAULT_USER_AGENT = "siteguard/0.1"


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    headers: httpx.Headers
    body: str

    def __post_init__(self):
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers)

    def get_header(self, name: str) -> str:
        """Return the first value of a header by case-insensitive name, or "" when absent.

        Repeated headers are not joined.
        """
        values = self.headers.get_list(name)
        return values[0] if values else ""


class HTTPClient:
    """Async HTTP client for fetching pages under test."""

    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
            headers={"User-Agent": self.user_agent},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()

    async def request(self, method: str, url: str) -> HTTPResponse:
        """Make an HTTP request.

        Error statuses are returned, not raised.
        """
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        response = await self.client.request(method=method, url=url)

        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            headers=response.headers,
            body=response.text,
        )

    async def get(self, url: str) -> HTTPResponse:
        """Make a GET request."""
        return await self.request("GET", url)
