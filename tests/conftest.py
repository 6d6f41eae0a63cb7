"""Test configuration and fixtures for siteguard."""

import json
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from siteguard.tools.http import HTMLDocument, HTTPResponse


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's environment and ~/.siteguard out of tests."""
    for key in (
        "SITEGUARD_TIMEOUT",
        "SITEGUARD_CONCURRENCY",
        "SITEGUARD_RETRIES",
        "SITEGUARD_USER_AGENT",
        "SITEGUARD_VERIFY_SSL",
        "SITEGUARD_SITES_FILE",
        "SITEGUARD_VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_response() -> Callable[..., HTTPResponse]:
    """Build an HTTPResponse carrying the given headers."""

    def _make(headers: dict[str, str] | None = None, body: str = "") -> HTTPResponse:
        return HTTPResponse(
            url="https://example.com",
            status_code=200,
            headers=headers or {},
            body=body,
        )

    return _make


@pytest.fixture
def make_document() -> Callable[[str], HTMLDocument]:
    """Parse HTML markup into a document."""
    return HTMLDocument.parse


@pytest.fixture
def secure_headers() -> dict[str, str]:
    """Headers that pass every header check except CSP."""
    return {
        "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "1; mode=block",
        "X-Content-Type-Options": "nosniff",
        "Content-Security-Policy": "default-src 'self'",
    }


@pytest.fixture
def sites_file(temp_dir: Path) -> Path:
    """Write a two-site list and return its path."""
    path = temp_dir / "sites.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Secure Bank", "url": "https://secure.example"},
                {"name": "Down Bank", "url": "https://down.example"},
            ]
        )
    )
    return path
