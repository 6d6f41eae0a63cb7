"""Base contracts for security checks.

A check declares the kind of input it consumes through ``input_kind``. The
evaluator dispatches on that discriminant instead of inspecting types.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol

from .models import Verdict


class CheckInput(Enum):
    """Input a check is evaluated against."""

    HEADERS = "headers"
    DOCUMENT = "document"


class HeaderLookup(Protocol):
    """Case-insensitive header access over one HTTP response."""

    def get_header(self, name: str) -> str: ...


class Element(Protocol):
    """One element of a parsed document."""

    @property
    def tag_name(self) -> str: ...

    def attr(self, name: str) -> str: ...


class DocumentTree(Protocol):
    """Parsed document supporting CSS selector queries."""

    def select(self, selector: str) -> list[Element]: ...


class SecurityCheck(ABC):
    """A stateless rule producing exactly one verdict."""

    name: str
    input_kind: CheckInput


class HeaderCheck(SecurityCheck):
    """Check evaluated against response headers."""

    input_kind = CheckInput.HEADERS

    @abstractmethod
    def evaluate(self, headers: HeaderLookup) -> Verdict:
        """Evaluate the response headers."""


class DocumentCheck(SecurityCheck):
    """Check evaluated against the rendered document tree."""

    input_kind = CheckInput.DOCUMENT

    @abstractmethod
    def evaluate(self, document: DocumentTree) -> Verdict:
        """Evaluate the document tree."""


def read_header(headers: HeaderLookup, name: str) -> str:
    """Return a header value trimmed and lowercased for comparisons."""
    return (headers.get_header(name) or "").strip().lower()
