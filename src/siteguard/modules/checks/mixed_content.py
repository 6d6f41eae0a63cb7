"""Mixed content detection over the rendered document."""

from urllib.parse import urlsplit

from .base import DocumentCheck, DocumentTree, Element
from .models import Verdict

# attribute -> elements that load a subresource through it
RESOURCE_ATTRIBUTES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "src",
        (
            "img",
            "object",
            "embed",
            "frame",
            "iframe",
            "script",
            "source",  # audio/video
            "track",  # audio/video
        ),
    ),
    ("href", ("link",)),
    ("action", ("form",)),
    ("formaction", ("button", "input")),
)


def url_scheme(url: str) -> str:
    """Return the lowercased scheme of a URL, or an empty string."""
    url = url.strip()
    try:
        return urlsplit(url).scheme.lower()
    except ValueError:
        scheme, sep, _ = url.partition(":")
        return scheme.lower() if sep and "/" not in scheme else ""


class MixedContentCheck(DocumentCheck):
    """Flag subresources referenced over plain http."""

    name = "Mixed Content"

    def evaluate(self, document: DocumentTree) -> Verdict:
        return Verdict.combine(
            self._check_attribute(document, attribute, elements)
            for attribute, elements in RESOURCE_ATTRIBUTES
        )

    def _check_attribute(
        self, document: DocumentTree, attribute: str, elements: tuple[str, ...]
    ) -> Verdict:
        selector = ", ".join(f"{element}[{attribute}]" for element in elements)
        failures = [
            verdict
            for element in document.select(selector)
            if (verdict := self._check_element(element, attribute)) is not None
        ]
        return Verdict.combine(failures)

    @staticmethod
    def _check_element(element: Element, attribute: str) -> Verdict | None:
        url = element.attr(attribute)
        if url_scheme(url) != "http":
            return None
        return Verdict.fail(f'Insecure resource used `<{element.tag_name} {attribute}="{url}">`')
