"""HTTP helpers for siteguard."""

from .client import DEFAULT_USER_AGENT, HTTPClient, HTTPResponse
from .document import HTMLDocument, HTMLElement

__all__ = [
    "DEFAULT_USER_AGENT",
    "HTMLDocument",
    "HTMLElement",
    "HTTPClient",
    "HTTPResponse",
]
