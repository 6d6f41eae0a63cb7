"""HTML document wrapper exposing CSS selector queries."""

from bs4 import BeautifulSoup, Tag


class HTMLElement:
    """One element of a parsed HTML document."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def tag_name(self) -> str:
        return self._tag.name

    def attr(self, name: str) -> str:
        """Return an attribute value, or "" when the attribute is absent."""
        value = self._tag.get(name)
        if value is None:
            return ""
        # multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def __repr__(self) -> str:
        return f"HTMLElement({self._tag.name!r})"


class HTMLDocument:
    """Parsed HTML document."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def parse(cls, markup: str) -> "HTMLDocument":
        return cls(BeautifulSoup(markup or "", "html.parser"))

    def select(self, selector: str) -> list[HTMLElement]:
        """Return elements matching a CSS selector, in document order."""
        return [HTMLElement(tag) for tag in self.soup.select(selector)]
